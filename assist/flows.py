# assist/flows.py

import json
import logging
import re

from django.conf import settings
from pydantic import ValidationError

from .llm import LlmError, get_llm_client
from .prompts import (
    CONTENT_PROMPT,
    RECOMMENDATION_PROMPT,
    format_available_sessions,
    format_session_details,
)
from .schemas import (
    AvailableSession,
    ContentOutput,
    RecommendationDraft,
    RecommendationOutput,
)

logger = logging.getLogger(__name__)

NO_SESSIONS_REASONING = (
    "Currently, there are no specific learning sessions available that match your criteria "
    "or are active in our system. Please check back later or broaden your search!"
)
INVALID_RESPONSE_REASONING = (
    "An error occurred while generating recommendations. The AI did not provide a valid response."
)
DEFAULT_MATCH_REASONING = "Here are some sessions you might like."
DEFAULT_NO_MATCH_REASONING = (
    "We couldn't find a specific match from the available sessions based on your preferences."
)
CONTENT_UNAVAILABLE_TIP = "Could not generate suggestions at this time. Please try again."

_FENCE_RE = re.compile(r'^```(?:json)?\s*|\s*```$', re.IGNORECASE)


class MalformedReply(ValueError):
    pass


def _parse_json_reply(text):
    cleaned = _FENCE_RE.sub('', (text or '').strip())
    if not cleaned:
        raise MalformedReply("The AI returned an empty response.")
    try:
        return json.loads(cleaned)
    except ValueError as e:
        raise MalformedReply(f"The AI response was not valid JSON: {e}") from e


"""
Picks sessions for a learner out of the ones passed in. The model only
ever sees at most AI_MAX_AVAILABLE_SESSIONS of them, and anything it
recommends that isn't one of those ids is dropped. Every failure comes
back as an empty list with a reasoning that says what went wrong; this
never raises for provider or parsing problems.
"""
def recommend_sessions(learner_context, available_sessions, llm=None):
    sessions = [
        s if isinstance(s, AvailableSession) else AvailableSession.model_validate(s)
        for s in available_sessions
    ][:settings.AI_MAX_AVAILABLE_SESSIONS]

    if not sessions:
        logger.info("No active sessions to recommend from, skipping the model call")
        return RecommendationOutput(recommendations=[], reasoning=NO_SESSIONS_REASONING)

    prompt = RECOMMENDATION_PROMPT.format(
        user_profile=learner_context.user_profile,
        location=learner_context.location,
        past_activity=learner_context.past_activity,
        availability=learner_context.availability,
        available_sessions=format_available_sessions(sessions),
    )

    llm = llm or get_llm_client()
    try:
        reply = llm.invoke(prompt)
        draft = RecommendationDraft.model_validate(_parse_json_reply(reply))
    except LlmError as e:
        logger.error("Recommendation call failed: %s", e)
        return RecommendationOutput(recommendations=[], reasoning=f"An error occurred: {e}")
    except (MalformedReply, ValidationError) as e:
        logger.error("Recommendation reply unusable: %s", e)
        return RecommendationOutput(recommendations=[], reasoning=INVALID_RESPONSE_REASONING)
    except Exception as e:
        logger.exception("Recommendation flow failed unexpectedly")
        return RecommendationOutput(recommendations=[], reasoning=f"An error occurred: {e}")

    known_ids = {s.id for s in sessions}
    valid = [r for r in draft.recommendations if r.session_id in known_ids]
    if len(valid) != len(draft.recommendations):
        logger.warning(
            "Dropped %d recommendation(s) with session ids that were not offered",
            len(draft.recommendations) - len(valid),
        )

    reasoning = draft.reasoning or (DEFAULT_MATCH_REASONING if valid else DEFAULT_NO_MATCH_REASONING)
    return RecommendationOutput(recommendations=valid, reasoning=reasoning)


"""
Title and description ideas for a teacher's draft session. On failure
the lists are empty and the only tip explains why.
"""
def suggest_session_content(content_input, llm=None):
    prompt = CONTENT_PROMPT.format(
        session_details=format_session_details(content_input),
        output_schema=json.dumps(ContentOutput.model_json_schema()),
    )

    llm = llm or get_llm_client()
    try:
        reply = llm.invoke(prompt)
        content = ContentOutput.model_validate(_parse_json_reply(reply))
    except LlmError as e:
        logger.error("Content suggestion call failed: %s", e)
        return ContentOutput(tips_for_engagement=[f"An error occurred: {e}"])
    except (MalformedReply, ValidationError) as e:
        logger.error("Content suggestion reply unusable: %s", e)
        return ContentOutput(tips_for_engagement=[CONTENT_UNAVAILABLE_TIP])
    except Exception as e:
        logger.exception("Content suggestion flow failed unexpectedly")
        return ContentOutput(tips_for_engagement=[f"An error occurred: {e}"])

    # A reply with neither titles nor descriptions is no suggestion at all
    if not content.suggested_titles and not content.suggested_descriptions:
        logger.error("Content suggestion reply held no titles or descriptions")
        return ContentOutput(tips_for_engagement=[CONTENT_UNAVAILABLE_TIP])
    return content
