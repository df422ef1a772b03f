from motionicon.context.icon_context import AmbientConfig, get_icon_context, icon_provider

__all__ = ["AmbientConfig", "get_icon_context", "icon_provider"]
