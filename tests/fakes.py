import io

from PIL import Image

SAMPLE_REPORT = """**1. Gemstone Identification:**
- Name: Ruby
- Type: Variety of Corundum
2. Physical Properties:
- Hardness: 9 on Mohs scale
"""


class FakeAnalyzer:
    def __init__(self, result=SAMPLE_REPORT, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def analyze(self, image, prompt):
        self.calls.append((image, prompt))
        if self.error is not None:
            raise self.error
        return self.result


def make_image_bytes(fmt="PNG", size=(8, 8), color=(120, 40, 160)):
    buffered = io.BytesIO()
    Image.new("RGB", size, color).save(buffered, format=fmt)
    return buffered.getvalue()


def make_decompression_bomb():
    """A tiny, valid PNG whose pixel count exceeds Pillow's safety limit."""
    buffered = io.BytesIO()
    Image.new("1", (20000, 20000)).save(buffered, format="PNG")
    return buffered.getvalue()


class FakeUploadFile:
    """Stands in for an UploadFile; records how much of the body was read."""

    def __init__(self, data, content_type, size=None):
        self.data = data
        self.content_type = content_type
        self.size = len(data) if size is None else size
        self.reads = []

    async def read(self, size=-1):
        self.reads.append(size)
        return self.data if size < 0 else self.data[:size]
