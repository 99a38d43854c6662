"""
Basic usage example of fastapi-param-converter.

Demonstrates:
- Registering RequestObjectBinder as the catch-all converter
- Binding a JSON body to a pydantic model with deserialization groups
- Reading validation errors from the request context
"""

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from fastapi_param_converter import (
    BindingConfiguration,
    Constraint,
    ConstraintValidator,
    ParamConverterManager,
    PydanticSerializer,
    RequestContext,
    RequestObjectBinder,
    converter_dependency,
)

app = FastAPI(title="Param Converter Example")


class Job(BaseModel):
    type: str
    parameters: dict = Field(default_factory=dict)
    # Only accepted from callers deserializing with the "admin" group
    queue: str = Field(default="default", json_schema_extra={"groups": ["admin"]})


validator = ConstraintValidator(
    {
        Job: [
            Constraint(
                check=lambda t: t in {"mailer", "sleeper"},
                message="Unknown job type.",
                property_path="type",
            ),
        ]
    }
)

manager = ParamConverterManager().add(
    RequestObjectBinder(
        PydanticSerializer(),
        validator,
        default_context={"groups": ["Default"]},
    ),
    priority=-100,
)

create_job = converter_dependency(
    BindingConfiguration(name="job", cls=Job),
    manager=manager,
)


@app.post("/jobs")
async def add_job(ctx: RequestContext = Depends(create_job)):
    """Queue a job described by the JSON body."""
    errors = ctx.attributes["validationErrors"]
    if errors:
        raise HTTPException(status_code=422, detail=errors.as_list())
    return ctx.attributes["job"]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl -H "Content-Type: application/json" -d '{"type": "mailer"}' http://localhost:8000/jobs
    # curl -H "Content-Type: application/xml" -d '<job/>' http://localhost:8000/jobs
