from .vimeo_video_player import VimeoVideoPlayer

__all__ = ["VimeoVideoPlayer"]
