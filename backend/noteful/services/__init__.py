# Services package init
"""
Noteful Backend — Services Layer
==================================

What:  Data access and business rules sitting between routes (HTTP) and the database.
Why:   Separation of concerns — routes handle HTTP, services handle queries and rules.
How:   Services accept an AsyncSession plus request DTOs and return response models.

Service Inventory:
    - FolderService: folder CRUD, presence/truthiness validation, not-found detection
    - NoteService:   the same for notes
"""
