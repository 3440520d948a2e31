#!/usr/bin/env python3
import argparse
import json
import os
import sys
from dataclasses import asdict

from tagcheck.models import ImageSpec
from tagcheck.repositories import ImagesRepository
from tagcheck.services.tag_check_service import TagCheckService
from tagcheck.utils.logging import setup_logger


def parse_reference(reference: str) -> ImageSpec:
    """Split ``registry/path:tag`` into an ImageSpec with a single tag."""
    name, sep, tag = reference.rpartition(":")
    if not sep or not tag or "/" in tag:
        raise ValueError(f"Image reference {reference} has no tag")
    registry_url, sep, image_path = name.partition("/")
    if not sep or not image_path:
        raise ValueError(f"Image reference {reference} has no registry host")
    return ImageSpec(registry_url=registry_url, image_path=image_path, tags=[tag])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Registry Tag Checker")
    parser.add_argument('references', nargs='*', metavar='IMAGE:TAG', help='Image reference such as ghcr.io/org/image:v1')
    parser.add_argument('--images-file', default=os.environ.get("IMAGES_FILE"), help='YAML file listing images and tags to check')
    parser.add_argument('--json', action='store_true', help='Print results as JSON')
    args = parser.parse_args(argv)

    logger = setup_logger("TagChecker")

    try:
        images = [parse_reference(r) for r in args.references]
        if args.images_file:
            logger.info(f"Loading images from {args.images_file}")
            images.extend(ImagesRepository(args.images_file).find_all())
        if not images:
            raise ValueError("No images to check")

        service = TagCheckService(images)
        service.run()
    except Exception as e:
        logger.error(f"Tag check failed: {e}")
        return 1

    if args.json:
        print(json.dumps([asdict(r) for r in service.results], indent=2))
    else:
        for r in service.results:
            state = "error" if r.error else ("found" if r.exists else "missing")
            print(f"{r.image}:{r.tag}\t{state}")

    if service.missing() or service.failed():
        logger.info(f"{len(service.missing())} missing, {len(service.failed())} failed")
        return 1
    logger.info("All tags exist")
    return 0


if __name__ == "__main__":
    sys.exit(main())
