"""Environment variable query endpoints.

Variables are only changed by running commands (path rewrites PATH); these
endpoints are read-only.
"""

from fastapi import APIRouter

from api.dependencies import ShellSessionDep
from api.exceptions import VariableNotFoundError
from api.models import VariableResponse, VariablesResponse

# Create router for environment-related endpoints
router = APIRouter(
    prefix="/environment",
    tags=["environment"],
)


@router.get("/variables", response_model=VariablesResponse)
async def list_variables(session: ShellSessionDep):
    """Get every variable in store order, plus the search path.

    Args:
        session: The ShellSession instance (injected by FastAPI).

    Returns:
        All variables and the current search path.
    """
    variables = session.environment.get_snapshot()
    return VariablesResponse(
        variables=variables,
        count=len(variables),
        search_path=list(session.search_path),
    )


@router.get("/variables/{name}", response_model=VariableResponse)
async def get_variable(name: str, session: ShellSessionDep):
    """Get one variable.

    Unlike $NAME substitution, an unset variable is reported as missing
    rather than as an empty string.

    Raises:
        VariableNotFoundError: If the variable is unset.
    """
    env = session.environment
    if not env.has(name):
        raise VariableNotFoundError(
            name=name, available_variables=[key for key, _ in env.items()]
        )

    return VariableResponse(name=name, value=env.get(name))
