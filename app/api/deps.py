"""FastAPI dependencies for the shared view model and per-request controller."""

from typing import Annotated

from fastapi import Depends, Request

from app.core.config import get_settings
from app.models.query import QueryParameters
from app.services.controller import InteractionController
from app.services.view_model import PricingViewModel


def get_view_model(request: Request) -> PricingViewModel:
    """The view model built by the lifespan; an empty one before startup."""
    view_model = getattr(request.app.state, "view_model", None)
    if view_model is None:
        view_model = PricingViewModel(source=get_settings().catalog_source)
        request.app.state.view_model = view_model
    return view_model


ViewModel = Annotated[PricingViewModel, Depends(get_view_model)]


def default_parameters() -> QueryParameters:
    """Fresh query parameters seeded from settings."""
    settings = get_settings()
    return QueryParameters(
        input_tokens=settings.default_input_tokens,
        output_tokens=settings.default_output_tokens,
        currency=settings.default_currency,
        fx_rate=settings.default_fx_rate,
    )


def get_controller(view_model: ViewModel) -> InteractionController:
    return InteractionController(view_model, default_parameters())


Controller = Annotated[InteractionController, Depends(get_controller)]
