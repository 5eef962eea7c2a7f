import logging
import os

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from app import config, intake
from app.errors import AnalysisError, ReadError, ValidationError
from app.formatter import format_report
from app.gemini import GeminiClient
from app.prompts import DEFAULT_ANALYSIS
from app.schemas import AnalysisResponse, ErrorResponse
from app.session import SessionStore, run_analysis

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Gemstone Identifier")
app.mount("/static", StaticFiles(directory=os.path.join(config.APP_DIR, "static")), name="static")
templates = Jinja2Templates(directory=os.path.join(config.APP_DIR, "templates"))

app.state.analyzer = GeminiClient()
app.state.sessions = SessionStore(app.state.analyzer)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


# ----- Error handlers -----
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(ReadError)
async def read_error_handler(request: Request, exc: ReadError):
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    return JSONResponse(status_code=502, content={"detail": exc.message})


# ----- Session helpers -----
async def get_session(request: Request):
    """Return (session_id, session, created) for the browser making the request."""
    store: SessionStore = request.app.state.sessions
    session_id = request.cookies.get(config.SESSION_COOKIE)
    session = store.get(session_id)
    if session is not None:
        return session_id, session, False
    session_id, session = await store.create()
    return session_id, session, True


def redirect_home(session_id: str) -> RedirectResponse:
    response = RedirectResponse(url="/", status_code=303)
    response.set_cookie(config.SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response


# ----- Endpoints -----
@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
async def index(request: Request):
    session_id, session, created = await get_session(request)
    response = templates.TemplateResponse(
        request,
        "index.html",
        {
            "view": session.view(),
            "accepted_types": ",".join(config.ACCEPTED_MEDIA_TYPES),
        },
    )
    if created:
        logger.info("Started session %s", session_id[:8])
        response.set_cookie(config.SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response


@app.post("/upload")
async def upload(request: Request, file: UploadFile = File(...)):
    session_id, session, _ = await get_session(request)
    await session.accept_file(file)
    return redirect_home(session_id)


@app.post("/identify")
async def identify(request: Request):
    session_id, session, _ = await get_session(request)
    try:
        await session.analyze()
    except ValidationError as e:
        session.error = e.message
    return redirect_home(session_id)


@app.post("/api/analyze", response_model=AnalysisResponse, responses=ERROR_RESPONSES)
async def analyze_image(request: Request, file: UploadFile = File(...)):
    image = await intake.read_upload_file(file)
    text = await run_analysis(request.app.state.analyzer, image)
    return AnalysisResponse(
        image_data_url=image.data_url,
        media_type=image.media_type,
        raw_report=text,
        report=format_report(text),
    )


@app.get("/api/default", response_model=AnalysisResponse, responses={404: {"model": ErrorResponse}})
def default_analysis(request: Request):
    store: SessionStore = request.app.state.sessions
    try:
        image = intake.load_default(store.default_image_path)
    except ReadError as e:
        return JSONResponse(status_code=404, content={"detail": e.message})
    return AnalysisResponse(
        image_data_url=image.data_url,
        media_type=image.media_type,
        raw_report=DEFAULT_ANALYSIS,
        report=format_report(DEFAULT_ANALYSIS),
        demo=True,
    )
