"""Services for the Reasoning Chat orchestrator."""
from .conversation_store import ConversationStore
from .llm_client import LLMClient, LLMResponse, LLMError, LLMClientError, normalize_content
from .query_router import QueryRouter, Classification
from .reasoning_engine import ReasoningEngine, ReasoningError, parse_response, extract_steps
from .orchestrator import ChatOrchestrator, ChatError, DEFAULT_SYSTEM_PROMPT

__all__ = ['ConversationStore', 'LLMClient', 'LLMResponse', 'LLMError', 'LLMClientError', 'normalize_content', 'QueryRouter', 'Classification', 'ReasoningEngine', 'ReasoningError', 'parse_response', 'extract_steps', 'ChatOrchestrator', 'ChatError', 'DEFAULT_SYSTEM_PROMPT']
