from ifirma.composition_root.container import IfirmaContainer, create_ifirma_container

__all__ = ["IfirmaContainer", "create_ifirma_container"]
