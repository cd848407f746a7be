from samvidhan.config.settings import settings, Settings, ArticleRangeMode, get_bool_env

__all__ = ["settings", "Settings", "ArticleRangeMode", "get_bool_env"]
