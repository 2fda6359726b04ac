from fastapi import APIRouter, Depends

from finagent.config import Config, get_config
from finagent.router.params import GetAgentConfigResponse, ToolInfo
from finagent.tools.registry import TOOL_TYPES

router = APIRouter(
    tags=["config"],
    prefix="/api/config",
)


@router.get("/agent")
async def get_agent_config(config: Config = Depends(get_config)) -> GetAgentConfigResponse:
    return GetAgentConfigResponse(
        model_name=config.model_name,
        max_iterations=config.max_iterations,
        timeout=config.timeout,
        max_message_length=config.max_message_length,
        tools=[
            ToolInfo(
                name=definition.name,
                description=definition.description or "",
                parameters=definition.parameters_json_schema,
            )
            for definition in (tool_type.definition() for tool_type in TOOL_TYPES)
        ],
    )
