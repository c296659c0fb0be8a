from .evaluate import router as evaluate_router

__all__ = ["evaluate_router"]
