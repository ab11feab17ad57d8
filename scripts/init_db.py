from app.config import configure_logging, get_settings
from app.db.engine import get_engine, init_db


def main():
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    engine = get_engine(settings.DB_URL, echo=settings.DB_ECHO)
    init_db(engine)
    engine.dispose()
    print("DB schema created.")

if __name__ == "__main__":
    main()
