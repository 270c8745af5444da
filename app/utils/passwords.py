import bcrypt

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _encode(password):
    return password.encode('utf-8')[:MAX_PASSWORD_BYTES]


def hash_password(password, rounds):
    """Return a salted bcrypt hash of ``password`` as text.

    The salt and cost factor are embedded in the returned value, so hashes
    written by other bcrypt implementations at the same cost verify too.
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode('utf-8')


def check_password(password, password_hash):
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
