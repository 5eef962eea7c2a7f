"""Per-user state for the identifier page.

Each browser gets an IdentifierSession holding the current image, the last
report and the last error. State changes only inside the session's own
operations; failures are stored as a message and never clear an existing report.
"""
import logging
import uuid
from collections import OrderedDict
from typing import List, Optional

from starlette.concurrency import run_in_threadpool

from app import config, intake
from app.errors import (
    ANALYSIS_FAILED_MESSAGE,
    INVALID_TYPE_MESSAGE,
    AnalysisError,
    IdentifierError,
    ValidationError,
)
from app.formatter import format_report
from app.prompts import DEFAULT_ANALYSIS, GEMSTONE_PROMPT
from app.schemas import ImagePayload, ReportBlock, SessionView

logger = logging.getLogger(__name__)


async def run_analysis(analyzer, image: ImagePayload) -> str:
    """Call the analyzer off the event loop; unexpected failures become AnalysisError."""
    logger.info("Analyzing %s image (%d bytes)", image.media_type, image.size)
    try:
        return await run_in_threadpool(analyzer.analyze, image, GEMSTONE_PROMPT)
    except AnalysisError:
        raise
    except Exception as e:
        logger.exception("Unexpected failure while analyzing image")
        raise AnalysisError(ANALYSIS_FAILED_MESSAGE) from e


class IdentifierSession:
    def __init__(self, analyzer, default_image_path: str = config.DEFAULT_IMAGE_PATH):
        self.analyzer = analyzer
        self.default_image_path = default_image_path
        self.image: Optional[ImagePayload] = None
        self.raw_report: str = ""
        self.report: List[ReportBlock] = []
        self.error: Optional[str] = None
        self.loading: bool = False
        self.demo: bool = False

    def _set_report(self, text: str) -> None:
        self.raw_report = text
        self.report = format_report(text)

    async def load_default(self) -> None:
        """Show the bundled image with its pre-written analysis (no API call)."""
        self.loading = True
        try:
            image = await run_in_threadpool(intake.load_default, self.default_image_path)
        except IdentifierError as e:
            self.error = e.message
            return
        finally:
            self.loading = False
        self.image = image
        self._set_report(DEFAULT_ANALYSIS)
        self.demo = True

    async def accept_upload(self, data: bytes, media_type: Optional[str]) -> None:
        try:
            image = intake.accept_upload(data, media_type)
        except IdentifierError as e:
            self.error = e.message
            return
        await self._take_upload(image)

    async def accept_file(self, file) -> None:
        """Same as accept_upload, for a form file that has not been read yet."""
        try:
            image = await intake.read_upload_file(file)
        except IdentifierError as e:
            self.error = e.message
            return
        await self._take_upload(image)

    async def _take_upload(self, image: ImagePayload) -> None:
        self.image = image
        self.error = None
        await self.analyze(image)

    async def analyze(self, image: Optional[ImagePayload] = None) -> None:
        if image is None:
            image = self.image
        if image is None:
            raise ValidationError(INVALID_TYPE_MESSAGE)

        self.loading = True
        self.error = None
        try:
            text = await run_analysis(self.analyzer, image)
        except AnalysisError as e:
            self.error = e.message
            return
        finally:
            self.loading = False

        self._set_report(text)
        self.demo = False
        logger.info("Analysis finished: %d report blocks", len(self.report))

    def view(self) -> SessionView:
        return SessionView(
            image_data_url=self.image.data_url if self.image else None,
            report=self.report,
            error=self.error,
            loading=self.loading,
            demo=self.demo,
        )


class SessionStore:
    """In-memory sessions keyed by cookie id; the oldest are dropped past the cap."""

    def __init__(self, analyzer, max_sessions: int = config.MAX_SESSIONS,
                 default_image_path: str = config.DEFAULT_IMAGE_PATH):
        self.analyzer = analyzer
        self.max_sessions = max_sessions
        self.default_image_path = default_image_path
        self._sessions: "OrderedDict[str, IdentifierSession]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, session_id: Optional[str]) -> Optional[IdentifierSession]:
        if not session_id or session_id not in self._sessions:
            return None
        self._sessions.move_to_end(session_id)
        return self._sessions[session_id]

    async def create(self):
        """Create and bootstrap a new session; returns (session_id, session)."""
        session_id = uuid.uuid4().hex
        session = IdentifierSession(self.analyzer, self.default_image_path)
        await session.load_default()
        self._sessions[session_id] = session
        while len(self._sessions) > self.max_sessions:
            self._sessions.popitem(last=False)
        return session_id, session
