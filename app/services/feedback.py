import logging
import re
from sqlalchemy.exc import SQLAlchemyError
from app.errors import InternalError, ValidationError
from app.models import PlayerFeedback

logger = logging.getLogger(__name__)


def _parse_player_id(player_id):
    if isinstance(player_id, bool):
        raise ValidationError("Player ID must be an integer")
    if isinstance(player_id, int):
        return player_id
    if isinstance(player_id, str) and re.fullmatch(r"[0-9]+", player_id.strip()):
        return int(player_id)
    raise ValidationError("Player ID must be an integer")


def submit_feedback(session, player_id, comment):
    """
    Store a feedback comment and return the id of the new row.

    The player id is not checked against existing accounts; whatever
    referential integrity the store enforces is all there is.
    """
    if not player_id or not comment:
        raise ValidationError("Player ID and comment are required")
    if not isinstance(comment, str):
        raise ValidationError("Comment must be a string")
    player_id = _parse_player_id(player_id)

    try:
        feedback = PlayerFeedback(player_id=player_id, comment=comment)
        session.add(feedback)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Database error saving feedback: {str(e)}",
                     exc_info=True)
        raise InternalError()

    logger.info(f"Saved feedback {feedback.id} from player {player_id}")
    return feedback.id
