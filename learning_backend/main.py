import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from learning_backend import errors
from learning_backend.core import config
from learning_backend.database import Base, engine, ensure_course_schema, ensure_enrollment_schema
from learning_backend.models import course, enrollment, user  # noqa: F401  (registers tables)
from learning_backend.routes import admin_routes, auth_routes, course_routes

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

app = FastAPI(title='Course Learning API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials='*' not in config.CORS_ALLOW_ORIGINS,
    allow_methods=['*'],
    allow_headers=['*'],
)


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    try:
        Base.metadata.create_all(bind=engine)
        ensure_course_schema()
        ensure_enrollment_schema()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL.')


@app.exception_handler(errors.ServiceError)
async def handle_service_error(request: Request, exc: errors.ServiceError) -> JSONResponse:
    if isinstance(exc, errors.Internal):
        logger.error('Internal error on %s %s', request.method, request.url.path)
    return JSONResponse(status_code=exc.status_code, content={'detail': exc.message}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for error in exc.errors():
        location = '.'.join(str(part) for part in error.get('loc', ()) if part != 'body')
        problems.append(f"{location}: {error.get('msg')}" if location else error.get('msg'))
    message = '; '.join(problems) or errors.ValidationError.default_message
    return JSONResponse(status_code=errors.ValidationError.status_code, content={'detail': message})


@app.exception_handler(SQLAlchemyError)
async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception('Database error on %s %s', request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=errors.Internal.status_code,
        content={'detail': errors.Internal.default_message},
    )


@app.get('/')
def root():
    return {'status': 'Course Learning API Running'}


app.include_router(auth_routes.router, prefix='/api')
app.include_router(course_routes.router, prefix='/api/courses')
app.include_router(admin_routes.router, prefix='/api/admin')
