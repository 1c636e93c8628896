import os
from dotenv import load_dotenv

load_dotenv()

# Section label -> partial under templates/. Closed set, read at startup.
DEFAULT_SECTION_TEMPLATES = {
    "header 1": "header/header1.html",
    "footer 1": "footer/footer1.html",
}

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Page composition
    BASE_URL = os.getenv("BASE_URL", "")
    SECTION_TEMPLATES = DEFAULT_SECTION_TEMPLATES
    LAYOUT_TEMPLATE = "layout.html"
    DIRECT_TEMPLATE = "render.html"
    PARTIAL_EXTENSION = ".html"

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///company_site.db")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    BASE_URL = "https://sites.example.com"

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig
}
