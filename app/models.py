from dataclasses import dataclass
from datetime import datetime
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class Account(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    # Uniqueness is checked by the registration flow, not the schema
    username = db.Column(db.String(255), nullable=False, index=True)
    password_hash = db.Column('password', db.String(255), nullable=False)

    def __repr__(self):
        return f"<Account {self.username}>"


class PlayerStats(db.Model):
    __tablename__ = 'player_stats'

    player_id = db.Column(db.Integer,
                          db.ForeignKey('users.id'),
                          primary_key=True,
                          autoincrement=False)
    games_played = db.Column(db.Integer, default=0, nullable=False)
    wins = db.Column(db.Integer, default=0, nullable=False)
    losses = db.Column(db.Integer, default=0, nullable=False)
    score = db.Column(db.Integer, default=0, nullable=False)


class PlayerFeedback(db.Model):
    __tablename__ = 'player_feedback'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    player_id = db.Column(db.Integer, nullable=False)
    comment = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)


@dataclass(frozen=True)
class AccountView:
    """Public shape of an account, safe to return to clients."""

    id: int
    username: str

    def to_dict(self):
        return {"id": self.id, "username": self.username}


def to_public_account(account):
    """Project a stored Account onto the fields clients may see."""
    return AccountView(id=account.id, username=account.username)
