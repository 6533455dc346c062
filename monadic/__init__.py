from .maybe import Maybe, Just, NOTHING, just, from_nullable
from .chunk import Chunk
from .reader import Reader, ask, pure
from .result import Try, Success, Failure, attempt
from .environment import Environment, TEST, PRODUCTION
from .logger import ConsoleLogger
