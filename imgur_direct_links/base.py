import logging
import sys

import click

logger = logging.getLogger(__name__)


class CatchAllExceptionsCommand(click.Command):
    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as ex:
            raise UnrecoverableError(str(ex), sys.exc_info()) from ex


class UnrecoverableError(click.ClickException):
    def __init__(self, message, exc_info):
        super().__init__(message)
        self.exc_info = exc_info

    def show(self, file=None):
        logger.error("*** An unrecoverable error occured ***")
        if logger.isEnabledFor(logging.DEBUG):
            logger.error(self.message, exc_info=self.exc_info)
        else:
            logger.error(self.message)


class ResolveFailedError(click.ClickException):
    """Some URLs could not be resolved (details already logged)."""
