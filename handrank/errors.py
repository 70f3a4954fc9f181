"""
Exception types raised while parsing hands and building configurations. All derive
from ValueError so callers that already guard input with `except ValueError` keep
working.
"""


class HandRankError(ValueError):
	pass


class UnrecognizedToken(HandRankError):
	def __init__(self, token, reason: str = "unrecognized token"):
		self.token = token
		self.reason = reason
		super().__init__(f"{reason}: {token!r}")


class MalformedHand(HandRankError):
	def __init__(self, text, reason: str = "malformed hand", parts=None):
		self.text = text
		self.reason = reason
		self.parts = parts
		super().__init__(f"{reason}: {text!r}")


class ConfigurationHazard(HandRankError):
	def __init__(self, category, weight, reason: str):
		self.category = category
		self.weight = weight
		self.reason = reason
		super().__init__(f"{category}={weight!r}: {reason}")
