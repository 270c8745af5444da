import logging
from sqlalchemy.exc import SQLAlchemyError
from app.errors import Conflict, InternalError, Unauthorized, ValidationError
from app.models import Account, to_public_account
from app.services.stats import initialize_player_stats
from app.utils.passwords import check_password, hash_password

logger = logging.getLogger(__name__)

CREDENTIALS_REQUIRED = "Username and password are required"


def _require_credentials(username, password):
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError(CREDENTIALS_REQUIRED)
    if not username or not password:
        raise ValidationError(CREDENTIALS_REQUIRED)


def find_account(session, username):
    """Exact, case-sensitive lookup by username."""
    return session.query(Account).filter(Account.username == username).first()


def register_account(session, username, password, rounds):
    """
    Create an account and its zeroed stats row, returning the new account id.

    The existence check and the insert are separate statements, so two
    concurrent registrations of the same name can both get through.
    A failure while creating the stats row is logged and otherwise ignored:
    the account has already been committed and stays usable.
    """
    _require_credentials(username, password)

    try:
        if find_account(session, username) is not None:
            raise Conflict("Username already exists")

        account = Account(username=username,
                          password_hash=hash_password(password, rounds))
        session.add(account)
        session.commit()
        account_id = account.id
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Database error during registration: {str(e)}",
                     exc_info=True)
        raise InternalError()

    try:
        initialize_player_stats(session, account_id)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(
            f"Error initializing player stats for account {account_id}: {str(e)}",
            exc_info=True)

    logger.info(f"Created new account: {username} (id={account_id})")
    return account_id


def authenticate(session, username, password):
    """Return the public view of the account if the credentials match."""
    _require_credentials(username, password)

    try:
        account = find_account(session, username)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Database error during login: {str(e)}", exc_info=True)
        raise InternalError()

    # Same error for unknown user and wrong password
    if account is None or not check_password(password, account.password_hash):
        logger.info(f"Failed login attempt for username: {username}")
        raise Unauthorized("Invalid credentials")

    logger.info(f"Successful login for account: {account.username}")
    return to_public_account(account)
