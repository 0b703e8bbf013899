import inflection


def canonical_name(identifier: str) -> str:
    """Lowercase, underscore separated form of an identifier or type expression.

    ``SessionStore`` becomes ``session_store`` and ``Vec<User>`` becomes ``vec_user``.
    """
    return inflection.parameterize(inflection.underscore(identifier), separator="_")
