"""Exceptions for use in Bracket Engine"""

# Bracket Engine
# Copyright (C) 2025  Bracket Engine developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


# ========== Base Application Exception ==========


class BracketEngineException(Exception):
    """Base exception for all Bracket Engine errors.

    All custom exceptions in the application should inherit from this class.
    Every message is meant to be shown to the end user as-is.
    """

    pass


# ========== Not Found Exceptions ==========


class NotFoundException(BracketEngineException):
    """Base exception for references that do not resolve."""

    pass


class MatchNotFoundException(NotFoundException):
    """Raised when a requested match cannot be found."""

    pass


class PlayerNotFoundException(NotFoundException):
    """Raised when a match references a player that does not exist."""

    pass


# ========== Invalid Input Exceptions ==========


class InvalidInputException(BracketEngineException):
    """Base exception for malformed user input."""

    pass


class InvalidScoreException(InvalidInputException):
    """Raised when a score is not a finite number."""

    pass


class InvalidProofUrlException(InvalidInputException):
    """Raised when a proof link is not a direct image link."""

    pass


class InvalidRoundException(InvalidInputException):
    """Raised when a round code is not one of the bracket stages."""

    pass


# ========== Rule Violation Exceptions ==========


class RuleViolationException(BracketEngineException):
    """Base exception for operations the bracket rules forbid."""

    pass


class TiedScoreException(RuleViolationException):
    """Raised when both scores are equal (no draws in direct elimination)."""

    pass


class EmptyRoundException(RuleViolationException):
    """Raised when the source round has no matches."""

    pass


class RoundIncompleteException(RuleViolationException):
    """Raised when the source round still has matches to play."""

    pass


class OddWinnerCountException(RuleViolationException):
    """Raised when the source round's winners cannot be paired."""

    pass


class RoundAlreadyExistsException(RuleViolationException):
    """Raised when the target round has already been generated."""

    pass


class NoRoundFoundException(RuleViolationException):
    """Raised when no round with matches exists to advance from."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(BracketEngineException):
    """Base exception for failures of the storage collaborators."""

    pass


class StorageException(ResourceException):
    """Raised when the local tournament file cannot be written or removed."""

    pass


class RemoteSourceException(ResourceException):
    """Raised when the remote snapshot cannot be fetched or decoded."""

    pass
