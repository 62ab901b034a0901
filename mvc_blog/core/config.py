import logging

from pydantic_settings import BaseSettings

from mvc_blog.core.env_manager import EnvManager


class Settings(BaseSettings):
    PROJECT_NAME: str = EnvManager.get_env_variable("PROJECT_NAME", "MVC Blog")
    PROJECT_INFO: str = EnvManager.get_env_variable(
        "PROJECT_INFO", "Model-View-Controller demonstration around a blog post"
    )
    PROJECT_VERSION: str = EnvManager.get_env_variable("PROJECT_VERSION", "1.0.0")
    LOG_LEVEL: str = EnvManager.get_env_variable("LOG_LEVEL", "WARNING")
    DEFAULT_VIEW: str = EnvManager.get_env_variable("DEFAULT_VIEW", "console")

    # Initial post used by the demo entry point
    POST_TITLE: str = EnvManager.get_env_variable("POST_TITLE", "My First Post")
    POST_CONTENT: str = EnvManager.get_env_variable(
        "POST_CONTENT", "This is my first post content."
    )
    POST_AUTHOR: str = EnvManager.get_env_variable("POST_AUTHOR", "Author")
    UPDATED_TITLE: str = EnvManager.get_env_variable("UPDATED_TITLE", "My Updated Post")

    def get_log_level(self) -> int:
        """Resolve LOG_LEVEL to a logging level number."""
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.WARNING


settings = Settings()
