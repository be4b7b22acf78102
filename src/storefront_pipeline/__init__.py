"""Storefront Pipeline - request pipeline, error envelopes and UI state for a storefront API."""

from storefront_pipeline.app import build_pipeline, create_app
from storefront_pipeline.completion import CompletionSignal
from storefront_pipeline.config import Settings
from storefront_pipeline.context import RequestContext
from storefront_pipeline.errors import (
    ErrorEnvelope,
    ErrorNormalizer,
    register_error_handlers,
)
from storefront_pipeline.exceptions import (
    BadRequest,
    HandlerFailure,
    NotFound,
    StorefrontError,
)
from storefront_pipeline.interceptor import ResponseInterceptor
from storefront_pipeline.log import configure_logging
from storefront_pipeline.middleware import PipelineMiddleware
from storefront_pipeline.models import (
    Category,
    Product,
    ProductDetail,
    ProductImage,
    ProductVariant,
    StoreLocation,
)
from storefront_pipeline.pipeline import Pipeline
from storefront_pipeline.record import AccessRecord
from storefront_pipeline.routes import register_routes
from storefront_pipeline.stage import PipelineStage, StageCategory
from storefront_pipeline.stages.cors import CorsHeaders
from storefront_pipeline.stages.request_logger import RequestLogger
from storefront_pipeline.storage import MemStorage, Storage
from storefront_pipeline.ui.debug_panel import Control, DebugPanel, PanelView
from storefront_pipeline.ui.state import (
    UIContextValue,
    UIProvider,
    UIState,
    current_provider,
    use_ui,
)

__all__ = [
    "AccessRecord",
    "BadRequest",
    "Category",
    "CompletionSignal",
    "Control",
    "CorsHeaders",
    "DebugPanel",
    "ErrorEnvelope",
    "ErrorNormalizer",
    "HandlerFailure",
    "MemStorage",
    "NotFound",
    "PanelView",
    "Pipeline",
    "PipelineMiddleware",
    "PipelineStage",
    "Product",
    "ProductDetail",
    "ProductImage",
    "ProductVariant",
    "RequestContext",
    "RequestLogger",
    "ResponseInterceptor",
    "Settings",
    "StageCategory",
    "Storage",
    "StoreLocation",
    "StorefrontError",
    "UIContextValue",
    "UIProvider",
    "UIState",
    "build_pipeline",
    "configure_logging",
    "create_app",
    "current_provider",
    "register_error_handlers",
    "register_routes",
    "use_ui",
]
