import concurrent.futures
import threading

from features.chat.telegram.model.update import Update
from features.routing import endpoints
from features.routing.context import Context
from features.routing.handler_registry import Handler
from features.routing.router_settings import RouterSettings
from features.routing.update_classifier import UpdateClassifier
from util import error_codes, log
from util.errors import ConfigurationError


def _noop(_: Context) -> None:
    return None


class UpdateDispatcher:
    """
    Routes updates to their handlers and runs them.

    In synchronous mode the handler runs on the caller's thread and any error reaches the
    error sink before `process_update` returns. Otherwise each update becomes a task on a
    bounded thread pool and `process_update` returns as soon as the task is queued; errors
    then reach the sink from the worker thread.
    """

    __settings: RouterSettings
    __classifier: UpdateClassifier
    __executor: concurrent.futures.ThreadPoolExecutor | None
    __lock: threading.Lock
    __is_shut_down: bool

    def __init__(self, settings: RouterSettings, classifier: UpdateClassifier | None = None):
        if settings.max_workers < 1:
            raise ConfigurationError(
                f"At least one dispatch worker is needed, got {settings.max_workers}",
                error_codes.INVALID_WORKER_COUNT,
            )
        self.__settings = settings
        self.__classifier = classifier or UpdateClassifier(settings.registry, settings.bot)
        self.__executor = None
        self.__lock = threading.Lock()
        self.__is_shut_down = False

    @property
    def settings(self) -> RouterSettings:
        return self.__settings

    def resolve_handler(self, update: Update) -> Handler:
        """Never returns None: falls back to the 'any' handler, then to a no-op."""
        registry = self.__settings.registry
        handler = self.__classifier.select(update) or registry.get(endpoints.ON_ANY) or _noop
        # middleware goes around the fallback too
        return registry.wrap(handler)

    def process_update(self, update: Update):
        handler = self.resolve_handler(update)
        context = Context(update, self.__settings.bot)
        if self.__settings.synchronous:
            self.__run(handler, context)
            return
        self.__submit(handler, context)

    def shutdown(self, wait: bool = True):
        """Stops accepting updates; with `wait`, blocks until the queued handlers are done."""
        with self.__lock:
            self.__is_shut_down = True
            executor = self.__executor
        if executor:
            log.d(f"Shutting down the dispatcher (wait = {wait})")
            executor.shutdown(wait = wait)

    def __submit(self, handler: Handler, context: Context):
        # the shut-down check and the submit happen under the same lock
        with self.__lock:
            if self.__is_shut_down:
                raise ConfigurationError("The dispatcher has been shut down", error_codes.DISPATCHER_SHUT_DOWN)
            if self.__executor is None:
                self.__executor = concurrent.futures.ThreadPoolExecutor(
                    max_workers = self.__settings.max_workers,
                    thread_name_prefix = "update-handler",
                )
            self.__executor.submit(self.__run, handler, context)

    def __run(self, handler: Handler, context: Context):
        try:
            error = handler(context)
        except Exception as e:
            error = e
        if error is not None:
            self.__report(error, context)

    def __report(self, error: Exception, context: Context):
        try:
            self.__settings.error_sink(error, context)
        except Exception as e:
            log.e(f"Error sink failed while reporting update #{context.update.update_id}", e)
