"""
Customer Service
"""
from app.services.record_service import RecordService, require_text, require_value


class CustomerService(RecordService):
    collection = "customers"
    entity = "Customer"
    id_prefix = "cust"

    def validate(self, draft):
        errors = []
        require_text(draft, "name", "Customer name is required", errors)
        require_value(draft, "type", "Customer type is required", errors)
        require_text(draft, "phone", "Phone number is required", errors)
        return errors

    def apply_defaults(self, record, data, now):
        record["assignedPropertyIds"] = record.get("assignedPropertyIds") or []
