## Request errors rendered as {success: false, error, statusCode}

class ProjectRequestError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidProjectRequest(ProjectRequestError):
    status_code = 400


class CareerPathNotFound(ProjectRequestError):
    status_code = 404
