"""
HomeGraph Bridge - Source Root

Bridges a locally defined catalog of smart-home devices (driven by an MQTT
message bus) to the Google Assistant smart-home fulfillment protocol.

Layer Structure:
- Domain: Devices, traits, intents, validation and attribute merge rules
- Application: Intent handlers, device edit use cases and DTOs
- Infrastructure: Device repository, durable stores and live state cache
- Presentation: FastAPI controllers for fulfillment and device editing
- Shared: Logging, environment helpers and cross-layer enums
- Main: Composition root, settings and application entry point
"""
