"""
Property Service
"""
from app.models import PropertyStatus
from app.services.record_service import (
    RecordService, require_positive, require_text, require_value,
)


class PropertyService(RecordService):
    collection = "properties"
    entity = "Property"
    id_prefix = "prop"
    positive_fields = {
        "price": "Price must be greater than 0",
        "area": "Area must be greater than 0",
    }

    def validate(self, draft):
        errors = []
        require_text(draft, "name", "Property name is required", errors)
        require_value(draft, "type", "Property type is required", errors)
        require_text(draft, "location", "Location is required", errors)
        require_positive(draft, "price", self.positive_fields["price"], errors)
        require_positive(draft, "area", self.positive_fields["area"], errors)
        return errors

    def apply_defaults(self, record, data, now):
        record["images"] = record.get("images") or []
        record["features"] = record.get("features") or []
        record["status"] = record.get("status") or PropertyStatus.AVAILABLE.value
