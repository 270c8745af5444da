import logging
from sqlalchemy.exc import SQLAlchemyError
from app.errors import InternalError
from app.models import Account, PlayerStats

logger = logging.getLogger(__name__)


def initialize_player_stats(session, player_id):
    """Insert the all-zero stats row for a freshly created account.

    Store errors propagate; the caller decides whether they matter.
    """
    stats = PlayerStats(player_id=player_id,
                        games_played=0,
                        wins=0,
                        losses=0,
                        score=0)
    session.add(stats)
    session.commit()
    logger.info(f"Initialized stats for player {player_id}")
    return stats


def list_player_stats(session):
    """Leaderboard rows for every account that has a stats row, best score first."""
    try:
        rows = session.query(
            Account.username.label('player_name'),
            PlayerStats.games_played,
            PlayerStats.wins,
            PlayerStats.losses,
            PlayerStats.score
        ).join(PlayerStats, Account.id == PlayerStats.player_id)\
         .order_by(PlayerStats.score.desc())\
         .all()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Database error loading player stats: {str(e)}",
                     exc_info=True)
        raise InternalError()

    return [{
        "playerName": row.player_name,
        "gamesPlayed": row.games_played,
        "gamesWon": row.wins,
        "gamesLost": row.losses,
        "score": row.score
    } for row in rows]
