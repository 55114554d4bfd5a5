import io

import pandas as pd
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH

from utils.payments import format_payment_month
from utils.tenants import status_label

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
DOCX_MIMETYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _money(value):
    return float(value or 0)


def owner_workbook(summary, payments, tenants):
    """Summary / Payments / Tenants sheets as an in-memory ``.xlsx``."""
    df_summary = pd.DataFrame([
        {"Item": "Properties", "Value": summary.get("total_properties", 0)},
        {"Item": "Active rooms", "Value": summary.get("active_rooms", 0)},
        {"Item": "Income this year", "Value": summary.get("total_year_income", 0)},
        {"Item": "Pending payments", "Value": summary.get("pending_payments", 0)},
        {"Item": "Tenants", "Value": len(tenants)},
    ])

    df_payments = pd.DataFrame([{
        "ID": p.id,
        "Room": p.room.room_number if p.room else p.room_id,
        "Tenant": p.user_name or "",
        "Month": format_payment_month(p.payment_month),
        "Room fee": _money(p.room_fee),
        "Electricity": _money(p.electricity_fee),
        "Water": _money(p.water_fee),
        "Other": _money(p.other_charges),
        "Total": _money(p.total_amount),
        "Status": "Paid" if p.is_paid else "Unpaid",
        "Paid at": p.paid_at or "",
    } for p in payments], columns=[
        "ID", "Room", "Tenant", "Month", "Room fee", "Electricity",
        "Water", "Other", "Total", "Status", "Paid at",
    ])

    df_tenants = pd.DataFrame([{
        "Username": t.username,
        "Full name": t.full_name,
        "Email": t.email,
        "Phone": t.phone or "",
        "Property": t.renthouse_name,
        "Room": t.room_number,
        "Monthly rent": _money(t.monthly_rent),
        "Total paid": _money(t.total_paid),
        "Outstanding": _money(t.outstanding_balance),
        "Payment status": status_label(t.payment_status),
    } for t in tenants], columns=[
        "Username", "Full name", "Email", "Phone", "Property", "Room",
        "Monthly rent", "Total paid", "Outstanding", "Payment status",
    ])

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="xlsxwriter") as writer:
        df_summary.to_excel(writer, index=False, sheet_name="Summary")
        df_payments.to_excel(writer, index=False, sheet_name="Payments")
        df_tenants.to_excel(writer, index=False, sheet_name="Tenants")

        workbook = writer.book
        header_format = workbook.add_format({"bold": True, "bg_color": "#CCE5FF", "border": 1})
        for sheet_name, df in (("Summary", df_summary), ("Payments", df_payments), ("Tenants", df_tenants)):
            worksheet = writer.sheets[sheet_name]
            for col_num, value in enumerate(df.columns.values):
                worksheet.write(0, col_num, value, header_format)

    output.seek(0)
    return output


def payment_receipt(payment, room=None):
    """A one-page ``.docx`` receipt for a single payment."""
    room = room or payment.room
    doc = Document()
    doc.add_heading("PAYMENT RECEIPT", level=0).alignment = WD_ALIGN_PARAGRAPH.CENTER

    doc.add_heading("1. Room", level=1)
    if room:
        doc.add_paragraph(f"Property: {room.renthouse_name or ''}")
        doc.add_paragraph(f"Address: {room.renthouse_address or ''}")
        doc.add_paragraph(f"Room: {room.room_number} (floor {room.floor_number or '-'})")
        doc.add_paragraph(f"Tenant: {room.renter_full_name or room.renter_name or payment.user_name or ''}")
    else:
        doc.add_paragraph(f"Room ID: {payment.room_id}")

    doc.add_heading("2. Charges", level=1)
    doc.add_paragraph(f"Billing month: {format_payment_month(payment.payment_month)}")
    table = doc.add_table(rows=1, cols=2)
    table.style = "Table Grid"
    header = table.rows[0].cells
    header[0].text = "Item"
    header[1].text = "Amount"
    lines = [
        ("Room fee", payment.room_fee),
        ("Electricity", payment.electricity_fee),
        ("Water", payment.water_fee),
        (payment.other_charges_description or "Other charges", payment.other_charges),
        ("Total", payment.total_amount),
    ]
    for label, amount in lines:
        cells = table.add_row().cells
        cells[0].text = label
        cells[1].text = f"{_money(amount):,.2f}"

    doc.add_heading("3. Status", level=1)
    if payment.is_paid:
        doc.add_paragraph(f"Paid on {payment.paid_at or ''}")
    else:
        doc.add_paragraph("Unpaid")

    buffer = io.BytesIO()
    doc.save(buffer)
    buffer.seek(0)
    return buffer
