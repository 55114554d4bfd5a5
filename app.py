from flask import Flask, render_template, redirect, url_for, flash, request
from flask_login import current_user
from dotenv import load_dotenv
from datetime import datetime, timedelta
import logging
import os
from extensions import api, mail, login_manager
from services.api import ApiError, ApiUnauthorized

# Setup Flask
load_dotenv()

app = Flask(__name__)
app.config['SECRET_KEY'] = os.getenv("SECRET_KEY", "secret_key")

# Remote API
app.config["API_BASE_URL"] = os.getenv("API_URL", "http://localhost:8080/api")
app.config["API_TIMEOUT"] = float(os.getenv("API_TIMEOUT", "10"))

# Session replaces the auth cookies: 7 days, same-site only
app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(days=7)
app.config["SESSION_COOKIE_SAMESITE"] = "Strict"
app.config["SESSION_COOKIE_HTTPONLY"] = True
app.config["SESSION_COOKIE_SECURE"] = os.getenv("SESSION_COOKIE_SECURE", "false").lower() == "true"

# Image uploads are forwarded to the API, never stored here
app.config["ALLOWED_EXTENSIONS"] = {"png", "jfif", "jpg", "jpeg", "gif", "webp"}
app.config["MAX_CONTENT_LENGTH"] = 5 * 1024 * 1024  # 5MB/file

# Flask-Mail (contact form)
app.config.update(
    MAIL_SERVER=os.getenv("MAIL_SERVER", "smtp.gmail.com"),
    MAIL_PORT=int(os.getenv("MAIL_PORT", "587")),
    MAIL_USE_TLS=True,
    MAIL_USERNAME=os.getenv("MAIL_USERNAME"),
    MAIL_PASSWORD=os.getenv("MAIL_PASSWORD"),
    MAIL_DEFAULT_SENDER=os.getenv("MAIL_DEFAULT_SENDER", os.getenv("MAIL_USERNAME")),
    MAIL_SUPPRESS_SEND=os.getenv("MAIL_SUPPRESS_SEND", "false").lower() == "true",
)
app.config["SUPPORT_EMAIL"] = os.getenv("SUPPORT_EMAIL", app.config["MAIL_DEFAULT_SENDER"])

# Logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Init api client, mail, login
api.init_app(app)
mail.init_app(app)
login_manager.init_app(app)
login_manager.login_view = "auth.login"
login_manager.login_message = "Please log in to continue."
login_manager.login_message_category = "info"

from utils.auth_store import current_session_user, logout_session
from utils.images import get_image_url
from utils.payments import format_payment_month


# Import blueprints
from blueprints.auth.routes import auth_bp
app.register_blueprint(auth_bp, url_prefix="/auth")

from blueprints.owner.routes import owner_bp
app.register_blueprint(owner_bp, url_prefix="/owner")

from blueprints.user.routes import user_bp
app.register_blueprint(user_bp, url_prefix="/user")

from blueprints.main.routes import main_bp
app.register_blueprint(main_bp)


@login_manager.user_loader
def load_user(user_id):
    user = current_session_user()
    if user is None or user.get_id() != user_id:
        return None
    return user


#-------------------------------------------------------
# API errors
@app.errorhandler(ApiUnauthorized)
def handle_unauthorized(error):
    app.logger.info("API rejected the session token, logging out")
    logout_session()
    flash(error.message, "warning")
    return redirect(url_for("auth.login"))


@app.errorhandler(ApiError)
def handle_api_error(error):
    app.logger.warning("Unhandled API error on %s: %s", request.path, error.message)
    flash(error.message, "danger")
    if current_user.is_authenticated:
        return redirect(url_for(current_user.dashboard_endpoint))
    return redirect(url_for("main.home"))


@app.errorhandler(404)
def not_found(error):
    return render_template("errors/404.html"), 404


#-------------------------------------------------------
# Templates
@app.template_filter("image_url")
def image_url_filter(path):
    return get_image_url(path, app.config["API_BASE_URL"])


@app.template_filter("payment_month")
def payment_month_filter(value):
    return format_payment_month(value)


@app.template_filter("money")
def money_filter(value):
    return f"${float(value or 0):,.2f}"


@app.context_processor
def inject_year():
    return {"year": datetime.now().year}


if __name__ == "__main__":
    app.run(debug=True)
