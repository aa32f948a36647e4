"""
Pydantic models for lambda-utils.
"""

from lambda_utils.models.invoke import Authorizer, InvokeEvent, RequestContext

__all__ = ["Authorizer", "InvokeEvent", "RequestContext"]
