from flask_login import LoginManager
from flask_mail import Mail

from services.api import ApiClient

api = ApiClient()
mail = Mail()
login_manager = LoginManager()
