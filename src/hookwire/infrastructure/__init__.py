"""Infrastructure layer - consumers of the hook engine and the registry.

This layer contains:
- Plugins (plugin base class and manager)
- Component and zone registries
- The route table
- The FastAPI server integration
"""
