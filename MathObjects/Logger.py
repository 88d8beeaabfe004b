from __future__ import annotations

import datetime
import io
import typing

from . import Exceptions

DEBUG: int = 0
INFO: int = 1
WARN: int = 2
ERROR: int = 3
CRITICAL: int = 4

__LEVEL_NAMES__: dict[int, str] = {DEBUG: 'DEBUG', INFO: 'INFO', WARN: 'WARN', ERROR: 'ERROR', CRITICAL: 'CRITICAL'}


class Logger:
	"""
	Class representing a log writer over a text stream
	"""

	def __init__(self, stream: io.IOBase, timezone: datetime.timezone = datetime.timezone.utc, level: int = DEBUG):
		"""
		Class representing a log writer over a text stream
		- Constructor -
		:param stream: The stream to write results to
		:param timezone: The timezone to log with
		:param level: The lowest level that is written; messages below it are dropped
		:raises InvalidArgumentException: If the stream or timezone have the wrong type
		:raises ValueError: If the level is unknown
		:raises IOError: If the stream is closed or not writable
		"""

		if not isinstance(stream, io.IOBase):
			raise Exceptions.InvalidArgumentException(Logger.__init__, 'stream', type(stream), (io.IOBase,))
		elif not isinstance(timezone, datetime.timezone):
			raise Exceptions.InvalidArgumentException(Logger.__init__, 'timezone', type(timezone), (datetime.timezone,))
		elif level not in __LEVEL_NAMES__:
			raise ValueError(f'Unknown log level \'{level}\'')

		if stream.closed:
			raise IOError('Stream is closed')
		elif not stream.writable():
			raise IOError('Target stream is not writable')

		self.__stream__: typing.Optional[io.IOBase] = stream
		self.__timezone__: datetime.timezone = timezone
		self.__level__: int = level
		self.__stream__.write('==========[ Log Opened ]==========\n\n')

	def __enter__(self) -> Logger:
		return self

	def __exit__(self, exc_type, exc_val, exc_tb) -> None:
		if not self.closed:
			self.detach()

	def __write__(self, level: int, msg: typing.Any) -> Logger:
		"""
		INTERNAL METHOD
		Writes a single timestamped line
		:param level: The message level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		if self.closed:
			raise IOError('Log is closed')
		elif level < self.__level__:
			return self

		timestamp: str = datetime.datetime.now(self.__timezone__).strftime('%m/%d/%Y %H:%M:%S.%f')
		self.__stream__.write(f'{timestamp} [ {self.__timezone__} ] [ {__LEVEL_NAMES__[level]} ]: {str(msg).strip()}\n')
		return self

	def __release__(self) -> io.IOBase:
		if self.closed:
			raise IOError('Log is closed')

		stream: io.IOBase = self.__stream__
		stream.write('\n==========[ Log Closed ]==========\n')
		stream.flush()
		self.__stream__ = None
		return stream

	def close(self) -> None:
		"""
		Closes the log writer and its stream
		Any further write is erroneous
		:raises IOError: If log is already closed
		"""

		self.__release__().close()

	def detach(self) -> None:
		"""
		Detaches the log writer
		The underlying stream is not closed
		Any further write is erroneous
		:raises IOError: If log is already closed
		"""

		self.__release__()

	def debug(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on DEBUG level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__(DEBUG, msg)

	def info(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on INFO level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__(INFO, msg)

	def warn(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on WARN level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__(WARN, msg)

	def error(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on ERROR level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__(ERROR, msg)

	def critical(self, msg: typing.Any) -> Logger:
		"""
		Writes a message to the log on CRITICAL level
		:param msg: The message to write
		:return: This log writer instance
		:raises IOError: If log is closed
		"""

		return self.__write__(CRITICAL, msg)

	@property
	def closed(self) -> bool:
		"""
		:return: Whether this log writer was closed or detached
		"""

		return self.__stream__ is None

	@property
	def level(self) -> int:
		return self.__level__
