"""Route Modules — one file per concern, each defining its own APIRouter."""
