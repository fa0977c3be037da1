from agent.llm.base import LLMClient, LLMResponse
from agent.llm.factory import current_model, get_llm_client

__all__ = ["LLMClient", "LLMResponse", "current_model", "get_llm_client"]
