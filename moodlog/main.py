from fastapi import FastAPI
from moodlog import config
from moodlog.routers import entry_router
from moodlog.routers import mood_router
from moodlog.routers import stat_router
from moodlog.utils.logger import setup_logger

setup_logger(config.LOG_LEVEL, config.LOG_FILE)

app = FastAPI(
    title="Moodlog Backend", description="Backend for a personal mood journal."
)

app.include_router(mood_router.router)
app.include_router(entry_router.router)
app.include_router(stat_router.router)
