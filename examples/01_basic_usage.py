"""
Basic API Manager Usage Examples

Demonstrates typed GET and POST requests and error handling.
"""

from typing import List

from pydantic import BaseModel

from api_manager import APIManager, APIManagerConfig, APIError, ServerError, DecodingError


class Post(BaseModel):
    id: int
    userId: int
    title: str
    body: str


def typed_get_request():
    """GET request decoded into a model."""
    print("\n=== Typed GET Request ===")

    with APIManager(config=APIManagerConfig(base_url="https://jsonplaceholder.typicode.com")) as api:
        post = api.request("/posts/1", "GET", response_type=Post)
        print(f"Post #{post.id}: {post.title}")


def list_request():
    """GET request decoded into a list of models."""
    print("\n=== List Request ===")

    with APIManager(config=APIManagerConfig(base_url="https://jsonplaceholder.typicode.com")) as api:
        posts = api.request("/posts?userId=1", "GET", response_type=List[Post])
        print(f"Loaded {len(posts)} posts")


def post_with_body():
    """POST request with a JSON body."""
    print("\n=== POST with JSON ===")

    with APIManager(config=APIManagerConfig(base_url="https://jsonplaceholder.typicode.com")) as api:
        created = api.request(
            "/posts",
            "POST",
            response_type=Post,
            body={"title": "My Post", "body": "This is the content", "userId": 1},
        )
        print(f"Created: {created}")


def error_handling():
    """Each failure maps to one APIError subclass."""
    print("\n=== Error Handling ===")

    with APIManager(config=APIManagerConfig(base_url="https://jsonplaceholder.typicode.com")) as api:
        try:
            api.request("/posts/1", "GET", response_type=List[Post])
        except DecodingError as e:
            print(f"Decoding failed: {len(e.errors)} error(s)")
        except ServerError as e:
            print(f"Server error: {e.status_code}")
        except APIError as e:
            print(f"Request failed: {e}")


if __name__ == "__main__":
    print("=" * 50)
    print("API Manager - Basic Usage Examples")
    print("=" * 50)

    try:
        typed_get_request()
        list_request()
        post_with_body()
        error_handling()

        print("\n" + "=" * 50)
        print("All examples completed successfully!")
        print("=" * 50)

    except Exception as e:
        print(f"\nError: {e}")
