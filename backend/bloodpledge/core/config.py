from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "BloodPledge"
    VERSION: str = "1.0.0"

    DATABASE_URL: str = "sqlite:///./bloodpledge.db"

    # Credential hashing cost; tests lower this to keep hashing fast
    BCRYPT_ROUNDS: int = 12

    # Seed a demo hospital, patient and donor on startup
    SEED_DEMO_DATA: bool = True

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
