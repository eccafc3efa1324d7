"""Main entry point for the Reasoning Chat API."""
import logging
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import get_config, load_env
from logger import setup_logging
from models.api import (
    ChatRequest,
    ChatReply,
    HistoryResponse,
    ReasoningToggleRequest,
    SystemPromptRequest,
    TurnPayload,
)
from services.orchestrator import ChatOrchestrator, ChatError

# Initialize logging
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Reasoning Chat",
    description="Conversational assistant with memory and chain-of-thought reasoning",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:3001"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Single conversation session (initialized on startup)
orchestrator: ChatOrchestrator = None


@app.on_event("startup")
async def startup_event():
    """Initialize the orchestrator on startup."""
    global orchestrator

    load_env()
    config = get_config()
    setup_logging(config.log_level)

    logger.info(f"Initializing Reasoning Chat ({config.environment})...")

    try:
        orchestrator = ChatOrchestrator(
            api_key=config.api_key,
            model=config.model,
            temperature=config.temperature,
            context_window=config.context_window,
            max_memory_messages=config.max_memory_messages,
            use_reasoning_for_complex_queries=config.use_reasoning,
            provider=config.provider
        )
        logger.info("ChatOrchestrator initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}", exc_info=True)
        raise


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Reasoning Chat API"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "reasoning-chat",
        "version": "1.0.0"
    }


@app.post("/chat", response_model=ChatReply)
def chat_endpoint(request: ChatRequest) -> ChatReply:
    """
    Send one user message through the orchestrator.

    Args:
        request: ChatRequest with the user message

    Returns:
        ChatReply with the answer, optional reasoning trace and turn count

    Raises:
        HTTPException: 400 for an empty message, 502 when generation fails
    """
    if not request.message or not request.message.strip():
        raise HTTPException(status_code=400, detail="Message field is required and cannot be empty")

    logger.info(f"Processing message: {request.message[:100]}...")

    try:
        response = orchestrator.chat(request.message)
    except ChatError as e:
        logger.error(f"Chat error: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return ChatReply.from_response(response)


@app.get("/history", response_model=HistoryResponse)
async def get_history() -> HistoryResponse:
    """Return every turn currently held in memory."""
    turns = orchestrator.get_conversation_history()
    return HistoryResponse(
        turns=[TurnPayload.from_turn(t) for t in turns],
        count=len(turns)
    )


@app.delete("/history")
async def clear_history():
    """Clear conversation memory."""
    orchestrator.clear_memory()
    return {"status": "cleared", "count": orchestrator.memory.count()}


@app.put("/system-prompt")
async def update_system_prompt(request: SystemPromptRequest):
    """Replace the system prompt used for direct responses."""
    orchestrator.set_system_prompt(request.system_prompt)
    return {"system_prompt": orchestrator.system_prompt}


@app.put("/reasoning")
async def toggle_reasoning(request: ReasoningToggleRequest):
    """Enable or disable chain-of-thought reasoning for complex queries."""
    orchestrator.set_use_reasoning_for_complex(request.enabled)
    return {"enabled": orchestrator.use_reasoning_for_complex}


if __name__ == "__main__":
    import uvicorn
    load_env()
    port = get_config().port
    logger.info(f"Starting Reasoning Chat API on port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port)
