# inventory_tracker/common/response.py

from fastapi.responses import JSONResponse


class ErrorResponse:
    @staticmethod
    def send(error="An error occurred", status_code=500, headers=None):
        response = {
            "success": False,
            "error": error,
        }
        return JSONResponse(content=response, status_code=status_code, headers=headers)
