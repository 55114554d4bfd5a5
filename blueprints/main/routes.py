from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app
from flask_login import current_user, login_required
from flask_mail import Message
from smtplib import SMTPException
from extensions import mail
from services import user as user_service
from utils.fetching import fetch
from utils.search import filter_renthouses, favorite_states
from utils.validation import validate_contact

main_bp = Blueprint("main", __name__, template_folder="../../templates")

PRICE_RANGES = [
    ("", "Any price"),
    ("0-500", "Under $500"),
    ("500-1000", "$500 - $1,000"),
    ("1000-2000", "$1,000 - $2,000"),
    ("2000-", "$2,000+"),
]

FAQS = [
    ("How do I book a room?",
     "Open a property, pick one of its vacant rooms and press Book. The room is yours once the owner's system confirms it."),
    ("How are monthly payments created?",
     "Your landlord issues one bill per room per month. It shows up under Payments with a QR code you can scan to pay."),
    ("Can I list my own property?",
     "Yes. Register with the Owner role, then add your property, its floors and rooms from the owner dashboard."),
    ("What if I have issues with my rental?",
     "Use the contact form and our support team will get back to you."),
]


@main_bp.route("/")
def home():
    if current_user.is_authenticated:
        return redirect(url_for(current_user.dashboard_endpoint))
    return render_template("home.html")


@main_bp.route("/about")
def about():
    return render_template("about.html")


@main_bp.route("/faq")
def faq():
    return render_template("faq.html", faqs=FAQS)

#-------------------------------------------------------
# Contact form -> support mailbox
@main_bp.route("/contact", methods=["GET", "POST"])
def contact():
    if request.method == "POST":
        data, errors = validate_contact(request.form)
        if errors:
            for message in errors:
                flash(message, "danger")
            return render_template("contact.html", form=request.form, submitted=False), 400

        msg = Message(
            subject=f"[Renthouse] {data['subject']}",
            recipients=[current_app.config["SUPPORT_EMAIL"]],
            reply_to=data["email"],
            body=f"From: {data['name']} <{data['email']}>\n\n{data['message']}",
        )
        try:
            mail.send(msg)
        except (SMTPException, OSError) as exc:
            current_app.logger.error("Contact mail failed: %s", exc)
            flash("We could not send your message right now. Please try again later.", "danger")
            return render_template("contact.html", form=request.form, submitted=False), 502

        flash("Thanks! Your message has been sent.", "success")
        return render_template("contact.html", form={}, submitted=True)

    return render_template("contact.html", form={}, submitted=False)

#-------------------------------------------------------
# Search properties
@main_bp.route("/search")
@login_required
def search():
    name = request.args.get("name", "").strip()
    location = request.args.get("location", "").strip()
    price_range = request.args.get("price_range", "").strip()

    result = fetch(user_service.search_renthouses)
    all_renthouses = result.data or []

    favorites = {}
    if not current_user.is_owner:
        favorite_rooms = fetch(user_service.get_favorites, quiet=True).data or []
        favorites = favorite_states(all_renthouses, favorite_rooms)

    return render_template(
        "search.html",
        renthouses=filter_renthouses(all_renthouses, name, location, price_range),
        total=len(all_renthouses),
        favorites=favorites,
        name=name,
        location=location,
        price_range=price_range,
        price_ranges=PRICE_RANGES,
        has_filters=bool(name or location or price_range),
        error=result.error,
    )
