import random
import logging
from app.models import Account, PlayerStats
from app.services.auth import find_account
from app.utils.passwords import hash_password

logger = logging.getLogger(__name__)

DUMMY_PASSWORD = "password123"


def generate_username():
    """Generate a random username"""
    adjectives = [
        "Happy", "Clever", "Quick", "Calm", "Brave", "Smart", "Kind", "Wise",
        "Swift", "Bold", "Bright", "Sharp", "Keen", "Witty", "Agile", "Strong"
    ]
    nouns = [
        "Player", "Gamer", "Champion", "Hero", "Winner", "Master", "Ninja",
        "Wizard", "Warrior", "Knight", "Solver", "Sleuth", "Coder", "Hacker"
    ]
    return f"{random.choice(adjectives)}{random.choice(nouns)}{random.randint(1, 999)}"


def generate_stats(max_games):
    games_played = random.randint(0, max_games)
    wins = random.randint(0, games_played)
    losses = games_played - wins
    score = wins * random.randint(50, 150) + losses * random.randint(0, 20)
    return games_played, wins, losses, score


def generate_dummy_data(session, num_players=25, max_games=50, rounds=10):
    """
    Create `num_players` accounts with random statistics.

    Usernames already taken are skipped. All dummy accounts share the
    password in DUMMY_PASSWORD, hashed once.

    Returns:
        list of (account id, username) tuples for the created accounts
    """
    password_hash = hash_password(DUMMY_PASSWORD, rounds)
    created = []
    taken = set()

    try:
        for _ in range(num_players):
            username = generate_username()
            if username in taken or find_account(session, username):
                logger.debug(f"Skipping duplicate dummy username {username}")
                continue
            taken.add(username)

            account = Account(username=username, password_hash=password_hash)
            session.add(account)
            session.flush()

            games_played, wins, losses, score = generate_stats(max_games)
            session.add(
                PlayerStats(player_id=account.id,
                            games_played=games_played,
                            wins=wins,
                            losses=losses,
                            score=score))
            created.append((account.id, username))

        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(f"Generated {len(created)} dummy players")
    return created
