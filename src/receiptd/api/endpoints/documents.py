import logging
import os

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response

from receiptd.api.dependencies import get_file_handler, get_use_case
from receiptd.api.schemas import DocumentSchema, RenderError
from receiptd.application.services.layout_selector import select_layout
from receiptd.application.use_cases.render_document import RenderDocumentUseCase
from receiptd.domain.exceptions import FileTooLargeError, InputFileError, ReceiptError
from receiptd.infrastructure.file_handlers.mail_file_handler import MailFileHandler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])

ERROR_RESPONSES = {
    400: {"model": RenderError},
    413: {"model": RenderError},
    422: {"model": RenderError},
}


async def _read_upload(file: UploadFile, file_handler: MailFileHandler) -> str:
    file_content = await file.read()
    try:
        return file_handler.decode(file_content)
    except InputFileError as e:
        status_code = 413 if isinstance(e, FileTooLargeError) else 400
        raise HTTPException(
            status_code=status_code,
            detail={"error": str(e), "error_code": e.code},
        )


@router.post("/render", responses=ERROR_RESPONSES)
async def render_document(
    file: UploadFile = File(...),
    use_case: RenderDocumentUseCase = Depends(get_use_case),
    file_handler: MailFileHandler = Depends(get_file_handler),
):
    filename = file.filename or "upload"
    raw_text = await _read_upload(file, file_handler)

    result = use_case.execute(raw_text, filename)
    if not result["success"]:
        raise HTTPException(
            status_code=422,
            detail={"error": result["error"], "error_code": result["error_code"]},
        )

    stem = os.path.splitext(os.path.basename(filename))[0]
    return Response(
        content=result["pdf"],
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{stem}.pdf"'},
    )


@router.post("/extract", response_model=DocumentSchema, responses=ERROR_RESPONSES)
async def extract_document(
    file: UploadFile = File(...),
    use_case: RenderDocumentUseCase = Depends(get_use_case),
    file_handler: MailFileHandler = Depends(get_file_handler),
):
    raw_text = await _read_upload(file, file_handler)
    try:
        document = use_case.prepare(raw_text)
    except ReceiptError as e:
        logger.warning(f"Extraction failed for {file.filename}: {str(e)}")
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_code": e.code},
        )
    return DocumentSchema.from_document(document, select_layout(document))
