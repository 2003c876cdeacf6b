"""RoadReady car-rental booking API."""
