"""Example usage of the ActorHub Python SDK.

Run with ACTORHUB_API_KEY set in the environment.
"""

import sys

from actorhub import (
    ActorHub,
    ActorHubConfigError,
    ActorHubError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
)


def main() -> int:
    try:
        client = ActorHub.from_env()
    except ActorHubConfigError as e:
        print(e, file=sys.stderr)
        return 1

    with client:
        print("=== Verifying Image ===")
        try:
            verified = client.verify(
                image_url="https://example.com/image.jpg",
                include_license_options=True,
            )
        except ActorHubError as e:
            print(f"Verify error: {e}")
        else:
            if verified is not None:
                print(f"Protected: {verified.protected}")
                print(f"Faces detected: {verified.faces_detected}")
                for identity in verified.identities:
                    if identity.display_name:
                        score = (identity.similarity_score or 0.0) * 100
                        print(f"  - Identity: {identity.display_name} (similarity: {score:.2f}%)")

        print("\n=== Checking Consent ===")
        try:
            consent = client.check_consent(
                image_url="https://example.com/face.jpg",
                platform="runway",
                intended_use="video",
                region="US",
            )
        except ActorHubError as e:
            print(f"Consent check error: {e}")
        else:
            if consent is not None:
                print(f"Protected: {consent.protected}")
                for face in consent.faces:
                    print(f"  - Video generation allowed: {face.consent.video_generation}")
                    print(f"  - Commercial use allowed: {face.consent.commercial_use}")
                    print(f"  - License available: {face.license.available}")

        print("\n=== Marketplace Listings ===")
        try:
            listings = client.list_marketplace(category="ACTOR", sort_by="popular", limit=5)
        except ActorHubError as e:
            print(f"Marketplace error: {e}")
        else:
            print(f"Found {len(listings)} listings:")
            for listing in listings:
                print(f"  - {listing.title}: ${listing.base_price_usd:.2f} ({listing.category})")

        print("\n=== Error Handling Example ===")
        try:
            client.get_identity("nonexistent-id")
        except NotFoundError as e:
            print(f"Not found: {e.message}")
        except AuthenticationError as e:
            print(f"Auth error: {e.message}")
        except RateLimitError as e:
            print(f"Rate limited, retry after {e.retry_after} seconds")
        except ActorHubError as e:
            print(f"Other error: {e}")

    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
