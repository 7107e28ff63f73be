"""
Multipart Upload and Loading Indicator Examples.
"""

from api_manager import APIManager, APIManagerConfig, CallbackIndicator


def spinner_indicator():
    """Print a message while a request is in flight."""
    print("\n=== Loading Indicator ===")

    indicator = CallbackIndicator(
        on_show=lambda message: print(f"[spinner] {message or 'Loading...'}"),
        on_hide=lambda: print("[spinner] done"),
    )
    config = APIManagerConfig(
        base_url="https://httpbin.org",
        indicator_message="Fetching data",
    )

    with APIManager(config=config, indicator=indicator) as api:
        data = api.request("/get", "GET", response_type=dict)
        print(f"Origin: {data.get('origin')}")

        # Disable for background requests
        indicator.enabled = False
        api.request("/get", "GET", response_type=dict)


def upload_image():
    """Upload raw bytes with extra form fields."""
    print("\n=== Multipart Upload ===")

    fake_jpeg = b"\xff\xd8\xff\xe0" + b"\x00" * 64

    with APIManager(config=APIManagerConfig(base_url="https://httpbin.org")) as api:
        result = api.multipart_request(
            "/post",
            "POST",
            payload=fake_jpeg,
            response_type=dict,
            fields={"user_id": "42", "caption": "Profile photo"},
            field_name="avatar",
            file_name="avatar.jpg",
        )
        print(f"Form fields: {result['form']}")
        print(f"Files: {list(result['files'])}")


if __name__ == "__main__":
    spinner_indicator()
    upload_image()
