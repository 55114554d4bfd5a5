from flask import Blueprint, render_template, request, redirect, url_for, flash, current_app
from flask_login import current_user
from models.user import User
from services import auth as auth_service
from services.api import ApiError
from utils.auth_store import login_session, logout_session
from utils.validation import validate_login, validate_register

auth_bp = Blueprint("auth", __name__, template_folder="../../templates")

# Logged-in users never see the login/register pages
@auth_bp.before_request
def redirect_authenticated():
    if request.endpoint == "auth.logout":
        return None
    if current_user.is_authenticated:
        return redirect(url_for(current_user.dashboard_endpoint))


def login_error_message(error):
    if error.is_network_error:
        return "Network error. Please check your connection."
    if error.status_code == 400:
        return error.message or "Invalid credentials"
    if error.status_code == 401:
        return "Invalid username or password"
    if error.status_code >= 500:
        return "Server error. Please try again later."
    return "Login failed. Please try again."

#-------------------------------------------------------
# Register
@auth_bp.route("/register", methods=["GET", "POST"])
def register():
    if request.method == "POST":
        payload, errors = validate_register(request.form)
        if errors:
            for message in errors:
                flash(message, "danger")
            return render_template("auth/register.html", form=request.form), 400

        try:
            resp = auth_service.register(payload)
        except ApiError as exc:
            flash(exc.message or "Registration failed", "danger")
            return render_template("auth/register.html", form=request.form), 400

        if not resp.success:
            flash(resp.message or "Registration failed", "danger")
            return render_template("auth/register.html", form=request.form), 400

        flash("Registration successful! Please log in.", "success")
        return redirect(url_for("auth.login"))

    return render_template("auth/register.html", form={})

#-------------------------------------------------------
# Login
@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    if request.method == "POST":
        payload, errors = validate_login(request.form)
        if errors:
            for message in errors:
                flash(message, "danger")
            return render_template("auth/login.html", username=payload["username"]), 400

        try:
            resp = auth_service.login(payload["username"], payload["password"])
        except ApiError as exc:
            # A 401 here means bad credentials, not an expired session
            current_app.logger.info("Login failed for %s: %s", payload["username"], exc.message)
            flash(login_error_message(exc), "danger")
            return render_template("auth/login.html", username=payload["username"]), 400

        if not resp.success or not resp.data:
            flash(resp.message or "Login failed", "danger")
            return render_template("auth/login.html", username=payload["username"]), 400

        data = dict(resp.data)
        token = data.pop("token", None)
        if not token:
            current_app.logger.warning("Login response for %s carried no token", payload["username"])
            flash("Login failed", "danger")
            return render_template("auth/login.html", username=payload["username"]), 400
        user = User.from_dict(data)
        login_session(user, token)
        flash("Login successful!", "success")
        return redirect(url_for(user.dashboard_endpoint))

    return render_template("auth/login.html", username="")

#-------------------------------------------------------
# Logout
@auth_bp.route("/logout", methods=["GET", "POST"])
def logout():
    logout_session()
    flash("You have been logged out.", "info")
    return redirect(url_for("auth.login"))
