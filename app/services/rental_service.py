"""
Rental Service
A rental links a tenant (customer) to a property and tracks how far the rent
has been paid. Referenced customer/property ids are not checked on write.
"""
from app.core.ids import parse_date
from app.services.record_service import RecordService, require_positive, require_value


class RentalService(RecordService):
    collection = "rentals"
    entity = "Rental"
    id_prefix = "rent"
    positive_fields = {"monthlyRent": "Monthly rent must be greater than 0"}

    def validate(self, draft):
        errors = []
        require_value(draft, "tenantId", "Tenant is required", errors)
        require_value(draft, "propertyId", "Property is required", errors)
        require_positive(draft, "monthlyRent", self.positive_fields["monthlyRent"], errors)
        if not draft.get("paidUntil"):
            errors.append("Paid until date is required")
        elif parse_date(draft.get("paidUntil")) is None:
            errors.append("Paid until must be a valid date (YYYY-MM-DD)")
        return errors

    def apply_defaults(self, record, data, now):
        record["paidUntil"] = parse_date(record["paidUntil"]).isoformat()
