"""
Wire shapes of the /todos resource.
What it defines:
- NewTask: the creation payload (server assigns the id)
- Task: a full TODO item as the server returns it

And, the main purpose:
Ensure every task crossing the wire has all of its fields, with no coercion.
"""


from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

class NewTask(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True, extra="ignore")

    user_id: StrictStr = Field(..., alias="userId", description="Owning user identifier")
    title: StrictStr
    completed: StrictBool

class Task(NewTask):
    id: StrictStr = Field(..., description="Server-assigned task identifier")

    def with_completed(self, completed: bool) -> "Task":
        return self.model_copy(update={"completed": completed})
