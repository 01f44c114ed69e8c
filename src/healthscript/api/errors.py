class APIError(Exception):
    def __init__(self, code: str, message: str, http_status: int = 400, details: dict = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status
        self.details = details


class ValidationError(APIError):
    def __init__(self, message: str, details: dict = None):
        super().__init__("INVALID_INPUT", message, 422, details)


# Domain error codes -> HTTP status
DOMAIN_ERROR_STATUS = {
    "PATIENT_NOT_FOUND": 404,
    "PRESCRIPTION_NOT_FOUND": 404,
    "RECORD_NOT_FOUND": 404,
    "ACCOUNT_NOT_FOUND": 404,
    "DUPLICATE_PATIENT": 409,
    "ACCOUNT_EXISTS": 409,
    "INVALID_CREDENTIALS": 401,
    "INVALID_UHID": 422,
    "INVALID_PATIENT_DATA": 422,
    "INVALID_PRESCRIPTION": 422,
    "INVALID_RECORD": 422,
    "INVALID_ACCOUNT_DATA": 422,
    "NO_TEXT_RECOGNIZED": 422,
}


def status_for_domain_error(error_code: str) -> int:
    return DOMAIN_ERROR_STATUS.get(error_code or "", 400)
