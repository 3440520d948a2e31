from .images_repository import ImagesRepository

__all__ = [
    'ImagesRepository'
]
