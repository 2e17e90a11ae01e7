import asyncio
import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from infinite_wiki.config import DEFAULT_TOPIC
from infinite_wiki.services.art_generator import art_generator
from infinite_wiki.services.content_store import content_store
from infinite_wiki.services.definition_stream import definition_streamer
from infinite_wiki.services.navigator import TopicNavigator

logger = logging.getLogger(__name__)
router = APIRouter()


def dispatch(navigator: TopicNavigator, msg: dict) -> bool:
    """Route one client message to the matching navigator event."""
    kind = msg.get("type")
    data = msg.get("data") or ""
    if kind == "search":
        return navigator.search(data)
    if kind == "word_clicked":
        return navigator.word_clicked(data)
    if kind == "random":
        return navigator.random_requested()
    raise ValueError(f"Unknown message type: {kind!r}")


@router.websocket("/ws/wiki/{session_id}")
async def wiki_websocket(websocket: WebSocket, session_id: str):
    """WebSocket endpoint driving one wiki page.

    Receives JSON events from the page:
    - {"type": "search", "data": "<topic>"}
    - {"type": "word_clicked", "data": "<word>"}
    - {"type": "random"}

    Sends back {"type": "state", "data": {...}} after every page change and
    {"type": "error", "data": "..."} for messages it cannot handle.
    """
    await websocket.accept()
    queue = content_store.subscribe(session_id)
    navigator = TopicNavigator(
        definition_streamer,
        art_generator,
        on_update=lambda state: content_store.publish_state(session_id, state),
    )
    logger.info(f"Wiki WebSocket connected for session: {session_id}")

    # Signal to coordinate shutdown between upstream/downstream
    shutdown_event = asyncio.Event()

    async def upstream():
        """Receive navigation events from the browser."""
        try:
            while not shutdown_event.is_set():
                raw = await websocket.receive_text()
                try:
                    dispatch(navigator, json.loads(raw))
                except (ValueError, AttributeError) as e:
                    logger.warning(f"Bad message on session {session_id}: {e}")
                    content_store.publish(session_id, {"type": "error", "data": str(e)})
        except WebSocketDisconnect:
            logger.info(f"Upstream disconnected for session: {session_id}")
        except Exception as e:
            logger.error(f"Upstream error: {e}", exc_info=True)
        finally:
            shutdown_event.set()
            # Wake downstream so it notices the shutdown.
            queue.put_nowait(None)

    async def downstream():
        """Forward page snapshots to the browser."""
        try:
            while True:
                message = await queue.get()
                if message is None or shutdown_event.is_set():
                    break
                await websocket.send_text(json.dumps(message))
        except WebSocketDisconnect:
            logger.info(f"Downstream disconnected for session: {session_id}")
        except Exception as e:
            logger.error(f"Downstream error: {e}", exc_info=True)
        finally:
            shutdown_event.set()

    navigator.navigate(DEFAULT_TOPIC)

    try:
        await asyncio.gather(upstream(), downstream())
    finally:
        await navigator.close()
        content_store.unsubscribe(session_id, queue)
        logger.info(f"Wiki WebSocket closed for session: {session_id}")
