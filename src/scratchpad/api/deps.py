"""FastAPI dependencies for the Scratchpad API."""

from typing import Annotated

from fastapi import Depends

from scratchpad.core.notebook import Notebook, get_notebook


def get_notebook_instance() -> Notebook:
    """
    Get Notebook instance for request processing.

    Returns:
        Notebook instance
    """
    return get_notebook()


NotebookDep = Annotated[Notebook, Depends(get_notebook_instance)]
