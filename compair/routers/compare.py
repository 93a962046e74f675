from fastapi import APIRouter, UploadFile, File, Form, HTTPException
from typing import Optional
from compair.errors import LoaderError, SourceTooLargeError
from compair.models.comparison_response import ComparisonResponse, TextComparisonRequest
from compair.services.compare_service import CompareService

router = APIRouter()
# stateless apart from settings, shared by every request
service = CompareService()


@router.post("/compare-files", response_model=ComparisonResponse)
async def compare_files(
    file1: Optional[UploadFile] = File(None),
    file2: Optional[UploadFile] = File(None),
    request_id: Optional[str] = Form(None),
):
    """
    Compare two uploaded text files line by line and return the
    side-by-side rendering with changed words highlighted.
    """
    try:
        return await service.compare_uploads(file1, file2, request_id=request_id)
    except SourceTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except LoaderError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/compare-text", response_model=ComparisonResponse)
def compare_text(request: TextComparisonRequest):
    """
    Same comparison for two texts posted as JSON.
    """
    return service.compare_texts(
        request.text_a,
        request.text_b,
        request_id=request.request_id,
        file_name_a=request.file_name_a,
        file_name_b=request.file_name_b,
    )
