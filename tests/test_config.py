from app.core.config import Settings


def test_handler_modules_parsed_from_comma_separated_string():
    settings = Settings(CQRS_HANDLER_MODULES="app.a.handlers, app.b.handlers,")
    assert settings.CQRS_HANDLER_MODULES == ["app.a.handlers", "app.b.handlers"]


def test_handler_modules_default_to_users_context():
    settings = Settings()
    assert settings.CQRS_HANDLER_MODULES == ["app.domains.users.application.handlers"]
    assert settings.CQRS_VALIDATE_ON_STARTUP is True


def test_cors_origins_parsed_from_string():
    settings = Settings(CORS_ORIGINS="http://a.test, http://b.test")
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]
