# FastAPI Application Redirect
# Lets uvicorn find the app when run from the project root:
#   uvicorn main:app --host 0.0.0.0 --port 8001

from fieldops.main import app  # noqa: F401
