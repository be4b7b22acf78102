"""Built-in pipeline stages."""

from storefront_pipeline.stages.cors import CorsHeaders
from storefront_pipeline.stages.request_logger import RequestLogger

__all__ = [
    "CorsHeaders",
    "RequestLogger",
]
