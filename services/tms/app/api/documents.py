from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.infrastructure.db import get_db
from app.application.documents import DocumentService
from app.application.schemas import DocumentCreate, DocumentRead

router = APIRouter(prefix="/api/documents", tags=["documents"])

@router.get("/", response_model=list[DocumentRead])
def list_documents(db: Session = Depends(get_db)):
    return DocumentService(db).list()

@router.post("/", response_model=DocumentRead, status_code=201)
def upload_document(payload: DocumentCreate, db: Session = Depends(get_db)):
    """Record an upload; the file body itself is not stored."""
    return DocumentService(db).create(payload)

@router.delete("/{document_id}", status_code=204)
def delete_document(document_id: int, db: Session = Depends(get_db)):
    DocumentService(db).delete(document_id)
    return None
