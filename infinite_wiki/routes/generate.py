import logging

from fastapi import APIRouter
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from infinite_wiki.services.art_generator import art_generator
from infinite_wiki.services.definition_stream import definition_streamer
from infinite_wiki.services.fallback_art import create_fallback_art

logger = logging.getLogger(__name__)
router = APIRouter()


class TopicRequest(BaseModel):
    topic: str


@router.post("/api/art")
async def generate_art(request: TopicRequest):
    """Generate ASCII art for one topic, falling back to a plain box."""
    topic = request.topic.strip()
    logger.info(f"Art request: topic={topic}")
    if not topic:
        return {"status": "error", "message": "Topic must not be empty."}

    try:
        art = await art_generator.generate(topic)
        source = "generated"
    except Exception as e:
        logger.warning(f"Art endpoint falling back for {topic!r}: {e}")
        art = create_fallback_art(topic)
        source = "fallback"

    return {"status": "success", "topic": topic, "source": source, **art.model_dump()}


@router.post("/api/define")
async def define(request: TopicRequest):
    """Stream the plain-text definition of a topic.

    Used by clients that do not hold a WebSocket session. Errors after the
    stream has started are logged and end the response early.
    """
    topic = request.topic.strip()
    logger.info(f"Define request: topic={topic}")
    if not topic:
        return {"status": "error", "message": "Topic must not be empty."}

    async def body():
        try:
            async for fragment in definition_streamer.stream(topic):
                yield fragment
        except Exception as e:
            logger.error(f"Define endpoint error: {e}", exc_info=True)
            yield f"Error: {e}"

    return StreamingResponse(body(), media_type="text/plain; charset=utf-8")


@router.get("/api/random-word")
async def random_word():
    """Let the text model pick a random topic."""
    try:
        word = await definition_streamer.random_word()
        return {"status": "success", "word": word}
    except Exception as e:
        logger.error(f"Random word endpoint error: {e}", exc_info=True)
        return {"status": "error", "message": str(e)}
