"""FastAPI server for the Gaussian catalog."""

import logging
from typing import Any, Callable, Dict, List, Optional, Type

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gaussian_catalog import __version__
from gaussian_catalog.api.models import (
    BaseMethodAPIModel,
    CalculationTypeAPIModel,
    CatalogAPIModel,
    ElectronicStateAPIModel,
    ElectronicStateMethodFamilyAPIModel,
    FullMethodAPIModel,
    MethodFamilyAPIModel,
    SpinStateAPIModel,
    SpinStateElectronicStateMethodFamilyAPIModel,
)
from gaussian_catalog.core.errors import (
    CatalogError,
    DuplicateValueError,
    EntityNotFoundError,
    NullParameterError,
    ValueInUseError,
)
from gaussian_catalog.core.models import ENTITY_FAMILIES
from gaussian_catalog.storage import CatalogStorage
from gaussian_catalog.utils.config import get_config_value, load_dotenv_once

logger = logging.getLogger(__name__)

load_dotenv_once()

API_PREFIX = "/api/v1"

app = FastAPI(
    title="Gaussian Catalog API",
    description="API for managing the Gaussian method catalog",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Cache for the storage
storage_cache: Dict[str, CatalogStorage] = {}


def get_storage() -> CatalogStorage:
    """Get the catalog storage, initializing it if necessary."""
    if "storage" not in storage_cache:
        storage_cache["storage"] = CatalogStorage(get_config_value("database_uri"))
    return storage_cache["storage"]


def reset_storage_cache():
    """Reset the storage cache."""
    storage = storage_cache.pop("storage", None)
    if storage is not None:
        storage.dispose()


def _error_response(status_code: int, exc: Exception, request: Request) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(NullParameterError)
async def null_parameter_handler(request: Request, exc: NullParameterError):
    return _error_response(400, exc, request)


@app.exception_handler(EntityNotFoundError)
async def entity_not_found_handler(request: Request, exc: EntityNotFoundError):
    return _error_response(404, exc, request)


@app.exception_handler(ValueInUseError)
async def value_in_use_handler(request: Request, exc: ValueInUseError):
    return _error_response(409, exc, request)


@app.exception_handler(DuplicateValueError)
async def duplicate_value_handler(request: Request, exc: DuplicateValueError):
    return _error_response(409, exc, request)


def _dump(models: List[Any]) -> List[Dict[str, Any]]:
    return [model.to_dict() for model in models]


def _call(action: str, fn: Callable[..., Any], *args, **kwargs) -> Any:
    """Run a storage call, turning unexpected errors into a 500 response."""
    logger.debug(f"{action} called")
    try:
        return fn(*args, **kwargs)
    except (CatalogError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"{action} had an error: {e}")
        raise HTTPException(status_code=500, detail=str(e))


def build_router(
    collection: str,
    family: str,
    api_model: Type[CatalogAPIModel],
    entity_name: str,
    add_lookups: Optional[Callable[[APIRouter, Callable[[], Any]], None]] = None,
) -> APIRouter:
    """Build the routes of one entity collection.

    Args:
        collection: URL segment, e.g. ``BaseMethods``
        family: Entity family key, e.g. ``base_method``
        api_model: The request model used for POST and PUT bodies
        entity_name: Human readable name used in messages
        add_lookups: Registers relationship lookup routes; called before the
            ``/{entity_id}`` routes so static paths take precedence

    Returns:
        The router, to be included in the app
    """
    router = APIRouter(prefix=f"{API_PREFIX}/{collection}", tags=[collection])

    def get_service(storage: CatalogStorage = Depends(get_storage)):
        return storage.service(family)

    @router.get("")
    async def get_all(service=Depends(get_service)):
        """Get all entities as Full models."""
        return _dump(_call(f"GET {collection}", service.get_all_full))

    if ENTITY_FAMILIES[family].has_relations:

        @router.get("/Simple")
        async def get_simple(service=Depends(get_service)):
            """Get all entities as Simple models."""
            return _dump(_call(f"GET {collection}/Simple", service.get_all_simple))

        @router.get("/Intermediate")
        async def get_intermediate(service=Depends(get_service)):
            """Get all entities as Intermediate models."""
            return _dump(
                _call(f"GET {collection}/Intermediate", service.get_all_intermediate)
            )

    @router.get("/List")
    async def get_list(service=Depends(get_service)):
        """Get all entities as Records."""
        return _dump(_call(f"GET {collection}/List", service.get_list))

    if add_lookups is not None:
        add_lookups(router, get_service)

    @router.get("/{entity_id}")
    async def get_one(entity_id: int, service=Depends(get_service)):
        """Get one entity as a Full model."""
        model = _call(f"GET {collection}/{entity_id}", service.get_by_id, entity_id)
        if model is None:
            raise HTTPException(
                status_code=404,
                detail=f"No {entity_name} exists with the supplied Id {entity_id}.",
            )
        return model.to_dict()

    @router.post("", status_code=201)
    async def create(body: api_model, service=Depends(get_service)):
        """Create an entity and return it as a Full model."""
        return _call(f"POST {collection}", service.create, body.to_domain()).to_dict()

    @router.put("/{entity_id}")
    async def update(entity_id: int, body: api_model, service=Depends(get_service)):
        """Update an entity and return it as a Full model."""
        if entity_id != body.id:
            logger.warning(
                f"PUT {collection}/{entity_id} called with mismatching Id {body.id}"
            )
            raise HTTPException(
                status_code=400,
                detail=(
                    f"The route parameter Id {entity_id} does not match the "
                    f"Model Id {body.id} from the request body."
                ),
            )
        return _call(
            f"PUT {collection}/{entity_id}", service.update, body.to_domain()
        ).to_dict()

    @router.delete("/{entity_id}")
    async def delete(entity_id: int, service=Depends(get_service)):
        """Archive an entity."""
        _call(f"DELETE {collection}/{entity_id}", service.delete, entity_id)
        return {
            "success": True,
            "message": f"{entity_name} with Id {entity_id} archived",
        }

    return router


def _base_method_lookups(router: APIRouter, get_service):
    @router.get("/Family")
    async def get_by_family(
        method_family_id: int = Query(..., alias="methodFamilyId"),
        service=Depends(get_service),
    ):
        return _dump(
            _call("GET BaseMethods/Family", service.get_by_method_family, method_family_id)
        )


def _electronic_state_method_family_lookups(router: APIRouter, get_service):
    @router.get("/ElectronicState")
    async def get_by_electronic_state(
        electronic_state_id: int = Query(..., alias="electronicStateId"),
        service=Depends(get_service),
    ):
        return _dump(
            _call(
                "GET ElectronicStatesMethodFamilies/ElectronicState",
                service.get_by_electronic_state,
                electronic_state_id,
            )
        )

    @router.get("/MethodFamily")
    async def get_by_method_family(
        method_family_id: Optional[int] = Query(None, alias="methodFamilyId"),
        service=Depends(get_service),
    ):
        return _dump(
            _call(
                "GET ElectronicStatesMethodFamilies/MethodFamily",
                service.get_by_method_family,
                method_family_id,
            )
        )

    @router.get("/ElectronicStateMethodFamily")
    async def get_by_both(
        electronic_state_id: int = Query(..., alias="electronicStateId"),
        method_family_id: Optional[int] = Query(None, alias="methodFamilyId"),
        service=Depends(get_service),
    ):
        return _dump(
            _call(
                "GET ElectronicStatesMethodFamilies/ElectronicStateMethodFamily",
                service.get_by_electronic_state_and_method_family,
                electronic_state_id,
                method_family_id,
            )
        )


def _spin_state_electronic_state_method_family_lookups(router: APIRouter, get_service):
    @router.get("/ElectronicStateMethodFamily")
    async def get_by_electronic_state_method_family(
        electronic_state_method_family_id: int = Query(
            ..., alias="electronicStateMethodFamilyId"
        ),
        service=Depends(get_service),
    ):
        return _dump(
            _call(
                "GET SpinStatesElectronicStatesMethodFamilies/ElectronicStateMethodFamily",
                service.get_by_electronic_state_method_family,
                electronic_state_method_family_id,
            )
        )

    @router.get("/SpinState")
    async def get_by_spin_state(
        spin_state_id: Optional[int] = Query(None, alias="spinStateId"),
        service=Depends(get_service),
    ):
        return _dump(
            _call(
                "GET SpinStatesElectronicStatesMethodFamilies/SpinState",
                service.get_by_spin_state,
                spin_state_id,
            )
        )

    @router.get("/SpinStateElectronicStateMethodFamily")
    async def get_by_both(
        electronic_state_method_family_id: int = Query(
            ..., alias="electronicStateMethodFamilyId"
        ),
        spin_state_id: Optional[int] = Query(None, alias="spinStateId"),
        service=Depends(get_service),
    ):
        return _dump(
            _call(
                "GET SpinStatesElectronicStatesMethodFamilies/SpinStateElectronicStateMethodFamily",
                service.get_by_spin_state_and_electronic_state_method_family,
                spin_state_id,
                electronic_state_method_family_id,
            )
        )


def _full_method_lookups(router: APIRouter, get_service):
    @router.get("/SpinStateElectronicStateMethodFamily")
    async def get_by_spin_state_electronic_state_method_family(
        spin_state_electronic_state_method_family_id: int = Query(
            ..., alias="spinStateElectronicStateMethodFamilyId"
        ),
        service=Depends(get_service),
    ):
        return _dump(
            _call(
                "GET FullMethods/SpinStateElectronicStateMethodFamily",
                service.get_by_spin_state_electronic_state_method_family,
                spin_state_electronic_state_method_family_id,
            )
        )

    @router.get("/BaseMethod")
    async def get_by_base_method(
        base_method_id: int = Query(..., alias="baseMethodId"),
        service=Depends(get_service),
    ):
        return _dump(
            _call("GET FullMethods/BaseMethod", service.get_by_base_method, base_method_id)
        )

    @router.get("/SpinStateElectronicStateMethodFamilyBaseMethod")
    async def get_by_both(
        spin_state_electronic_state_method_family_id: int = Query(
            ..., alias="spinStateElectronicStateMethodFamilyId"
        ),
        base_method_id: int = Query(..., alias="baseMethodId"),
        service=Depends(get_service),
    ):
        return _dump(
            _call(
                "GET FullMethods/SpinStateElectronicStateMethodFamilyBaseMethod",
                service.get_by_spin_state_electronic_state_method_family_and_base_method,
                spin_state_electronic_state_method_family_id,
                base_method_id,
            )
        )


# (collection, family, request model, display name, lookup routes)
COLLECTIONS = [
    ("MethodFamilies", "method_family", MethodFamilyAPIModel, "Method Family", None),
    ("SpinStates", "spin_state", SpinStateAPIModel, "Spin State", None),
    (
        "ElectronicStates",
        "electronic_state",
        ElectronicStateAPIModel,
        "Electronic State",
        None,
    ),
    (
        "CalculationTypes",
        "calculation_type",
        CalculationTypeAPIModel,
        "Calculation Type",
        None,
    ),
    (
        "BaseMethods",
        "base_method",
        BaseMethodAPIModel,
        "Base Method",
        _base_method_lookups,
    ),
    (
        "ElectronicStatesMethodFamilies",
        "electronic_state_method_family",
        ElectronicStateMethodFamilyAPIModel,
        "Electronic State/Method Family Combination",
        _electronic_state_method_family_lookups,
    ),
    (
        "SpinStatesElectronicStatesMethodFamilies",
        "spin_state_electronic_state_method_family",
        SpinStateElectronicStateMethodFamilyAPIModel,
        "Spin State/Electronic State/Method Family Combination",
        _spin_state_electronic_state_method_family_lookups,
    ),
    (
        "FullMethods",
        "full_method",
        FullMethodAPIModel,
        "Full Method",
        _full_method_lookups,
    ),
]

for _collection, _family, _api_model, _entity_name, _lookups in COLLECTIONS:
    app.include_router(
        build_router(_collection, _family, _api_model, _entity_name, _lookups)
    )


# API routes
@app.get("/")
async def root():
    """Root endpoint that returns basic API information."""
    return {"message": "Gaussian catalog API is running", "version": __version__}


def start_server(host: str = "127.0.0.1", port: int = 8000, reload: bool = False):
    """Start the FastAPI server."""
    uvicorn.run("gaussian_catalog.api.server:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    start_server()
