from fruit_app.core.config import Settings
from fruit_app.db.engine import get_engine
from fruit_app.db.schema import metadata


def main():
    settings = Settings()
    engine = get_engine(settings.database_url)
    metadata.drop_all(engine)
    metadata.create_all(engine)
    print("DB schema created.")


if __name__ == "__main__":
    main()
