"""Adapters for external systems: MongoDB, Spoonacular, Facebook and mail."""

from adapters.mongo_adapter import MongoStore
from adapters.spoonacular_adapter import SpoonacularClient
from adapters.facebook_adapter import FacebookOAuthClient
from adapters.mail_adapter import WelcomeMailer

__all__ = ["MongoStore", "SpoonacularClient", "FacebookOAuthClient", "WelcomeMailer"]
