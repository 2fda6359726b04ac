from finagent.router.api.config import router as config_router
from finagent.router.api.finance import router as finance_router

routers = [
    config_router,
    finance_router,
]
