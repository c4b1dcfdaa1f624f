"""
Receipt PDF generation using reportlab.
Works on a joined receipt (customer/property attached when known).
"""
import io
import logging

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.core.config import Settings, settings
from app.models import CustomerType, PaymentMethod, ReceiptType
from app.services.record_service import as_amount

logger = logging.getLogger(__name__)

RECEIPT_TYPE_LABELS = {
    ReceiptType.RENT.value: "Rent Payment",
    ReceiptType.DEPOSIT.value: "Deposit",
    ReceiptType.MAINTENANCE.value: "Maintenance",
    ReceiptType.OTHER.value: "Other",
}
PAYMENT_METHOD_LABELS = {
    PaymentMethod.CASH.value: "Cash",
    PaymentMethod.CARD.value: "Card",
    PaymentMethod.BANK_TRANSFER.value: "Bank Transfer",
    PaymentMethod.CHEQUE.value: "Cheque",
}
CUSTOMER_TYPE_LABELS = {
    CustomerType.INDIVIDUAL.value: "Individual",
    CustomerType.COMPANY.value: "Company",
}


def receipt_filename(receipt: dict) -> str:
    return f"receipt-{receipt.get('receiptNo') or receipt.get('id')}.pdf"


def _customer_label(customer: dict) -> str:
    name = customer.get("name") or "-"
    kind = CUSTOMER_TYPE_LABELS.get(customer.get("type"))
    return f"{name} ({kind})" if kind else name


def generate_receipt_pdf(receipt: dict, config: Settings = settings) -> bytes:
    """Render one receipt to PDF bytes."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=2 * cm,
        leftMargin=2 * cm,
        topMargin=2 * cm,
        bottomMargin=2 * cm,
        title=f"Receipt {receipt.get('receiptNo', '')}",
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "Title",
        parent=styles["Heading1"],
        fontSize=18,
        spaceAfter=6,
        textColor=colors.HexColor("#605c53"),
    )
    small_style = ParagraphStyle(
        "Small",
        parent=styles["Normal"],
        fontSize=8,
        textColor=colors.HexColor("#6b7280"),
    )

    customer = receipt.get("customer") or {}
    prop = receipt.get("property") or {}
    amount = as_amount(receipt.get("amount"))

    story = [
        Paragraph(config.COMPANY_NAME, title_style),
        Paragraph("PAYMENT RECEIPT", styles["Heading2"]),
        Spacer(1, 0.4 * cm),
    ]

    rows = [
        ["Field", "Details"],
        ["Receipt No", receipt.get("receiptNo") or "-"],
        ["Date", receipt.get("date") or "-"],
        ["Type", RECEIPT_TYPE_LABELS.get(receipt.get("type"), receipt.get("type") or "-")],
        ["Amount", f"{config.CURRENCY} {amount:,.3f}"],
        ["Paid By", receipt.get("paidBy") or "-"],
        ["Payment Method", PAYMENT_METHOD_LABELS.get(receipt.get("paymentMethod"), receipt.get("paymentMethod") or "-")],
        ["Reference", receipt.get("reference") or "-"],
        ["Customer", _customer_label(customer)],
        ["Property", prop.get("name") or "-"],
        ["Description", receipt.get("description") or "-"],
    ]
    tbl = Table(rows, colWidths=[5 * cm, 12 * cm])
    tbl.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#605c53")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f3f4f6")]),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#e5e7eb")),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LEFTPADDING", (0, 0), (-1, -1), 8),
    ]))
    story.append(tbl)
    story.append(Spacer(1, 1 * cm))
    story.append(Paragraph(f"{config.COMPANY_ADDRESS} | Tel: {config.COMPANY_PHONE}", small_style))

    doc.build(story)
    logger.info(f"[PDF] Rendered receipt {receipt.get('receiptNo')}")
    return buffer.getvalue()
