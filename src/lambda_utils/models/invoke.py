from pydantic import BaseModel, ConfigDict, Field


class Authorizer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    principal_id: str = Field(alias="principalId")
    user_id: str | None = Field(default=None, alias="userId")
    user_role: str | None = Field(default=None, alias="userRole")


class RequestContext(BaseModel):
    authorizer: Authorizer


class InvokeEvent(BaseModel):
    """API Gateway shaped event sent from one Lambda to another."""

    model_config = ConfigDict(populate_by_name=True)

    resource: str
    http_method: str = Field(alias="httpMethod")
    body: str | None = None
    path_parameters: dict[str, str] | None = Field(default=None, alias="pathParameters")
    query_string_parameters: dict[str, str] | None = Field(default=None, alias="queryStringParameters")
    request_context: RequestContext = Field(alias="requestContext")

    @classmethod
    def build(
        cls,
        resource: str,
        http_method: str,
        principal_id: str,
        body: str | None = None,
        path_parameters: dict[str, str] | None = None,
        query_string_parameters: dict[str, str] | None = None,
    ) -> "InvokeEvent":
        return cls(
            resource=resource,
            http_method=http_method,
            body=body,
            path_parameters=path_parameters,
            query_string_parameters=query_string_parameters,
            request_context=RequestContext(authorizer=Authorizer(principal_id=principal_id)),
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
