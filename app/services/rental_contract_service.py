"""
Rental Contract Service
Contract numbers are `RC-YYYYMMDD-###` with a random suffix; they are not
checked against existing contracts.
"""
from app.core.ids import generate_contract_number, parse_date
from app.models import ContractStatus
from app.services.record_service import (
    RecordService, require_positive, require_text,
)


class RentalContractService(RecordService):
    collection = "rentalContracts"
    entity = "Contract"
    id_prefix = "rc"
    positive_fields = {"monthlyRent": "Monthly rent must be greater than 0"}

    def validate(self, draft):
        errors = []
        require_text(draft, "landlordName", "Landlord name is required", errors)
        require_text(draft, "tenantName", "Tenant name is required", errors)
        require_text(draft, "tenantIdPassport", "Tenant ID/Passport is required", errors)
        require_text(draft, "tenantPhone", "Tenant phone is required", errors)

        valid_from = self._check_date(draft, "validFrom", "Contract start date", errors)
        valid_to = self._check_date(draft, "validTo", "Contract end date", errors)

        require_positive(draft, "monthlyRent", self.positive_fields["monthlyRent"], errors)

        if valid_from and valid_to and valid_to <= valid_from:
            errors.append("Contract end date must be after start date")
        return errors

    @staticmethod
    def _check_date(draft, field, label, errors):
        value = draft.get(field)
        if not value:
            errors.append(f"{label} is required")
            return None
        parsed = parse_date(value)
        if parsed is None:
            errors.append(f"{label} must be a valid date")
        return parsed

    def apply_defaults(self, record, data, now):
        record["contractNumber"] = record.get("contractNumber") or generate_contract_number(now.date())
        record["type"] = record.get("type") or "rental"
        record["status"] = record.get("status") or ContractStatus.DRAFT.value
