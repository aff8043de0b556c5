"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- services/  → ConversationService (create, list, get, rename, messages)
- dto/       → Data Transfer Objects and result types

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities, repositories, reply generator
"""
