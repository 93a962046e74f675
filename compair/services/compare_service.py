import logging
import uuid
from typing import Optional

from fastapi import UploadFile

from compair.config import Settings, get_settings
from compair.models.comparison_response import ComparisonResponse
from compair.services.comparator import compare
from compair.utils.text_loader import load_text_pair

logger = logging.getLogger(__name__)


class CompareService:
    """
    Runs one comparison per call:
      - load both sources (uploads only)
      - compare line by line
      - wrap the result with the request id and file names
    Holds nothing but settings, so one instance can serve every request.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    async def compare_uploads(
        self,
        upload_a: Optional[UploadFile],
        upload_b: Optional[UploadFile],
        request_id: Optional[str] = None,
    ) -> ComparisonResponse:
        text_a, text_b = await load_text_pair(
            upload_a,
            upload_b,
            encoding=self.settings.encoding,
            max_bytes=self.settings.max_upload_bytes,
        )
        return self.compare_texts(
            text_a,
            text_b,
            request_id=request_id,
            file_name_a=upload_a.filename,
            file_name_b=upload_b.filename,
        )

    def compare_texts(
        self,
        text_a: str,
        text_b: str,
        request_id: Optional[str] = None,
        file_name_a: Optional[str] = None,
        file_name_b: Optional[str] = None,
    ) -> ComparisonResponse:
        request_id = request_id or str(uuid.uuid4())
        file_name_a = file_name_a or "file1"
        file_name_b = file_name_b or "file2"

        logger.info("[CompareService] %s: comparing %s with %s", request_id, file_name_a, file_name_b)
        result = compare(text_a, text_b, highlight_class=self.settings.highlight_class)
        logger.info(
            "[CompareService] %s: %d lines, %d changed",
            request_id,
            result.line_count,
            result.changed_line_count,
        )

        return ComparisonResponse(
            request_id=request_id,
            file_name_a=file_name_a,
            file_name_b=file_name_b,
            title=f"{file_name_a} - {file_name_b}",
            result=result,
        )
