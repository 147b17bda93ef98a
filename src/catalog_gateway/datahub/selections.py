"""GraphQL field selections per entity kind.

Field aliases here are the keys the decoder models in
``catalog_gateway.datahub.models`` read, so the two must change together.
"""

from __future__ import annotations

TAG_SELECTION = """
    urn
    __typename
    ... on Tag {
        properties {
            name
            description
        }
    }
"""

PLATFORM_SELECTION = """
    urn
    __typename
    ... on DataPlatform {
        name
        properties {
            displayName
            type
        }
    }
"""

DATASET_SELECTION = """
    urn
    __typename
    ... on Dataset {
        name
        platform {
            urn
            __typename
            name
            properties {
                displayName
                type
            }
        }
        properties {
            name
            origin
        }
        schemaMetadata {
            fields {
                fieldPath
                type
                nativeDataType
            }
        }
        subTypes {
            typeNames
        }
        tags {
            tags {
                tag {
                    urn
                    __typename
                    properties {
                        name
                        description
                    }
                }
            }
        }
    }
"""
