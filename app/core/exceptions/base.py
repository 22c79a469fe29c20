class AppException(Exception):
    """Base exception for all application errors.

    ``status_code`` is the HTTP status a route layer should answer with.
    """

    status_code: int = 500

    def __init__(self, message: str = "An application error occurred"):
        self.message = message
        super().__init__(self.message)
