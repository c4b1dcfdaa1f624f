"""
Document Service
Document entries point at files stored by the upload service.
"""
from app.core.ids import today_iso
from app.models import DocumentCategory
from app.services.record_service import RecordService, require_text

DOCUMENT_CATEGORIES = tuple(category.value for category in DocumentCategory)


class DocumentService(RecordService):
    collection = "documents"
    entity = "Document"
    id_prefix = "doc"

    def validate(self, draft):
        errors = []
        require_text(draft, "name", "Document name is required", errors)
        category = draft.get("category")
        if category and category not in DOCUMENT_CATEGORIES:
            errors.append(f"Category must be one of: {', '.join(DOCUMENT_CATEGORIES)}")
        return errors

    def apply_defaults(self, record, data, now):
        record["category"] = record.get("category") or DocumentCategory.OTHER.value
        record["uploadDate"] = record.get("uploadDate") or today_iso(now.date())
        record.setdefault("fileType", "")
        record.setdefault("fileSize", 0)
