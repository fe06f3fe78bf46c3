"""Experimental sponge ciphers (Aurora, PHOTON-Beetle, Quark), a SPONGENT hash, and MQTT publish and subscribe tools."""

__version__ = "0.1.0"