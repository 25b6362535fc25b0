"""
Session maker used by the test factories.
"""
from emissions_tracker.database.session_manager.db_session import Database


class LazySessionMaker:
    """
    Resolves Database's session maker at call time.

    Factories are declared at import, before conftest has initialized the
    Database singleton, so the lookup is deferred until a factory saves.
    """

    def __call__(self):
        if Database._async_session_maker is None:
            raise RuntimeError(
                "Database not initialized. Request the initialize_db_session fixture."
            )
        return Database._async_session_maker()


async_session = LazySessionMaker()
