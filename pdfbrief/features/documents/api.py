from fastapi import APIRouter, Request, UploadFile

from pdfbrief.features.documents.service import DocumentsService, document_to_dict

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/upload")
async def upload_document(request: Request, file: UploadFile) -> dict[str, object]:
    service = DocumentsService(conn=request.app.state.db, cfg=request.app.state.cfg)
    return await service.upload(file=file)


@router.get("/{document_id}")
def get_document(request: Request, document_id: int) -> dict[str, object]:
    service = DocumentsService(conn=request.app.state.db, cfg=request.app.state.cfg)
    return document_to_dict(service.get(document_id=document_id))


@router.delete("/{document_id}")
def delete_document(request: Request, document_id: int) -> dict[str, object]:
    service = DocumentsService(conn=request.app.state.db, cfg=request.app.state.cfg)
    return service.delete(document_id=document_id)
