"""
HTTP client for a running Opal API server
"""
from typing import Optional, List, Dict, Any

import requests


class OpalClient:
    """
    Thin wrapper around the Opal REST API.

    Example usage:
        client = OpalClient("http://localhost:8000")

        # Preview without writing
        result = client.preview(source_text, "erc721")
        print(result["source"])

        # Augment a file on the server
        result = client.augment("contracts/NFTFactory.sol", "erc721")
    """

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str) -> Dict[str, Any]:
        response = requests.get(f"{self.base_url}{path}", timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = requests.post(f"{self.base_url}{path}", json=payload, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()
        if not data.get("success", False):
            raise RuntimeError(data.get("error") or "Augmentation failed")
        return data["result"]

    def health(self) -> Dict[str, Any]:
        return self._get("/")

    def list_profiles(self) -> List[Dict[str, Any]]:
        return self._get("/api/profiles")["profiles"]

    def augment(self, file_path: str, profile: str,
                output_dir: Optional[str] = None, dry_run: bool = False) -> Dict[str, Any]:
        """
        Augment a base contract on the server.

        Args:
            file_path: Base contract path, as seen by the server
            profile: Profile family id
            output_dir: Optional output directory
            dry_run: Compose only; the derived source is returned instead of written

        Returns:
            Result dict (contract, capabilities, output_path, ...)

        Raises:
            requests.HTTPError: On HTTP errors (e.g. 404 for a missing file)
            RuntimeError: If the augmentation itself failed
        """
        return self._post("/api/augment", {
            "file_path": file_path,
            "profile": profile,
            "output_dir": output_dir,
            "dry_run": dry_run
        })

    def preview(self, source: str, profile: str) -> Dict[str, Any]:
        return self._post("/api/preview", {"source": source, "profile": profile})
