"""Document uploads (tenant ID cards) and downloads."""

from __future__ import annotations

import mimetypes
from pathlib import Path

from ..client import BolibroClient


def file_part(path: Path) -> tuple[str, bytes, str]:
    """Build an httpx multipart file tuple from a path on disk."""
    content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return (path.name, path.read_bytes(), content_type)


class UploadService:
    def __init__(self, client: BolibroClient) -> None:
        self.client = client

    async def upload_id_card(self, path: Path) -> str:
        """Upload an ID card image and return the stored file URL."""
        data = await self.client.post("/upload/id-card", files={"idCard": file_part(Path(path))})
        return data["fileUrl"]

    async def get_uploaded_file(self, file_id: str) -> bytes:
        response = await self.client.request("GET", f"/upload/{file_id}")
        return response.content
