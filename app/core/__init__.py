"""
Core Application - Infrastructure & Base Classes

Generic, reusable base classes shared by the domain apps. Nothing in here
knows about notifications, chat or posts.

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Model Mixins (import from core.model_mixins):
    - UUIDPrimaryKeyMixin: UUID as primary key

Services (import from core.services):
    - BaseService: Base class for service layer
    - ServiceResult: Standard result wrapper for success/failure handling

Views (import from core.views):
    - health_check: Database connectivity probe
"""
