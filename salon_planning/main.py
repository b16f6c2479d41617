import logging

from fastapi import FastAPI

from salon_planning.api.planning import router as planning_router
from salon_planning.api.staff import router as staff_router
from salon_planning.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("anchor", "mode", "staff_id", "slot_date", "count", "attempt", "status", "path", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Salon Planning", version="1.0.0")

app.include_router(planning_router, tags=["planning"])
app.include_router(staff_router, tags=["staff"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
