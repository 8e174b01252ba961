"""Parameter models for tool arguments. Field aliases match the wire names."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ToolParams(BaseModel):
    """Base for all tool parameter models. Unknown keys are ignored."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class AddMemoryParams(ToolParams):
    content: StrictStr = Field(..., description="The content to store in memory")
    user_id: StrictStr = Field(..., alias="userId", description="User ID for memory storage")


class SearchMemoriesParams(ToolParams):
    query: StrictStr = Field(..., description="The search query")
    user_id: StrictStr = Field(..., alias="userId", description="User ID for memory storage")


class GetProcessTreeParams(ToolParams):
    pass


class ExecuteCommandParams(ToolParams):
    command: StrictStr = Field(..., description="The command to execute")
