from models.prompt import ChatResponse, ErrorResponse, PromptRequest

__all__ = ["ChatResponse", "ErrorResponse", "PromptRequest"]
