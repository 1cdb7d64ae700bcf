"""Built-in service catalog used when no catalog file is configured."""

from __future__ import annotations

from typing import Any

DEFAULT_CATEGORIES: list[dict[str, Any]] = [
    {
        "category_id": "education",
        "name": {"en": "Education", "ru": "Обучение"},
        "description": {
            "en": "Blockchain development courses and training",
            "ru": "Курсы и тренинги по блокчейн-разработке",
        },
        "display_order": 1,
    },
    {
        "category_id": "development",
        "name": {"en": "Development", "ru": "Разработка"},
        "description": {
            "en": "Blockchain application and smart contract development",
            "ru": "Разработка блокчейн-приложений и смарт-контрактов",
        },
        "display_order": 2,
    },
    {
        "category_id": "consulting",
        "name": {"en": "Consulting", "ru": "Консультации"},
        "description": {
            "en": "Expert blockchain project consulting",
            "ru": "Экспертные консультации по блокчейн-проектам",
        },
        "display_order": 3,
    },
    {
        "category_id": "content",
        "name": {"en": "Content", "ru": "Контент"},
        "description": {
            "en": "Educational and technical content creation",
            "ru": "Создание образовательного и технического контента",
        },
        "display_order": 4,
    },
]

DEFAULT_SERVICES: list[dict[str, Any]] = [
    {
        "service_id": "rust-blockchain-course",
        "category_id": "education",
        "name": {"en": "Rust for Blockchain Course", "ru": "Курс Rust для блокчейна"},
        "short_description": {
            "en": "Intensive Rust course for blockchain application development",
            "ru": "Интенсивный курс по Rust для разработки блокчейн-приложений",
        },
        "price_range": {"min": 800, "max": 1200},
        "complexity": "Advanced",
        "tags": ["rust", "blockchain", "education", "programming"],
        "timeline": "8-12 weeks",
        "is_popular": True,
    },
    {
        "service_id": "solidity-masterclass",
        "category_id": "education",
        "name": {"en": "Solidity Masterclass", "ru": "Мастер-класс по Solidity"},
        "short_description": {
            "en": "Advanced smart contract development course in Solidity",
            "ru": "Продвинутый курс по разработке смарт-контрактов на Solidity",
        },
        "price_range": {"min": 600, "max": 900},
        "complexity": "Advanced",
        "tags": ["solidity", "ethereum", "smart-contracts", "defi"],
        "timeline": "6-8 weeks",
    },
    {
        "service_id": "custom-blockchain-dev",
        "category_id": "development",
        "name": {"en": "Custom Blockchain Development", "ru": "Разработка кастомного блокчейна"},
        "short_description": {
            "en": "Build your own blockchain tailored to your requirements",
            "ru": "Создание собственного блокчейна под ваши требования",
        },
        "price_range": {"min": 50000, "max": 200000},
        "complexity": "Enterprise",
        "tags": ["blockchain", "custom-development", "consensus", "tokenomics"],
        "timeline": "6-12 months",
    },
    {
        "service_id": "defi-protocol-dev",
        "category_id": "development",
        "name": {"en": "DeFi Protocol Development", "ru": "Разработка DeFi протокола"},
        "short_description": {
            "en": "Build a full-featured DeFi protocol",
            "ru": "Создание DeFi протокола с полным набором функций",
        },
        "price_range": {"min": 25000, "max": 80000},
        "complexity": "Enterprise",
        "tags": ["defi", "smart-contracts", "yield-farming", "governance"],
        "timeline": "4-8 months",
        "is_popular": True,
    },
    {
        "service_id": "basic-consultation",
        "category_id": "consulting",
        "name": {"en": "Basic Consultation", "ru": "Базовая консультация"},
        "short_description": {
            "en": "General blockchain development questions",
            "ru": "Общие вопросы по блокчейн-разработке",
        },
        "price_range": {"min": 150, "max": 150},
        "complexity": "Basic",
        "tags": ["consultation", "architecture", "technology-selection"],
        "timeline": "1 hour",
    },
    {
        "service_id": "smart-contract-audit",
        "category_id": "consulting",
        "name": {"en": "Smart Contract Audit", "ru": "Аудит смарт-контрактов"},
        "short_description": {
            "en": "Detailed smart contract security audit",
            "ru": "Детальный аудит безопасности смарт-контрактов",
        },
        "price_range": {"min": 500, "max": 1500},
        "complexity": "Advanced",
        "tags": ["audit", "security", "smart-contracts", "vulnerability"],
        "timeline": "3-5 days",
        "is_popular": True,
    },
    {
        "service_id": "technical-blog-writing",
        "category_id": "content",
        "name": {"en": "Technical Blog Writing", "ru": "Написание технических статей"},
        "short_description": {
            "en": "High-quality technical content creation",
            "ru": "Создание качественного технического контента",
        },
        "price_range": {"min": 200, "max": 800},
        "complexity": "Advanced",
        "tags": ["content", "technical-writing", "documentation", "seo"],
        "timeline": "1-2 weeks per article",
    },
]

DEFAULT_STRATEGIES: list[dict[str, Any]] = [
    {
        "service_id": "rust-blockchain-course",
        "content_types": ["tutorial", "blog", "case-study"],
        "keywords": [
            "rust programming",
            "blockchain development",
            "rust blockchain",
            "systems programming",
            "memory safety",
            "performance optimization",
            "substrate framework",
            "polkadot development",
        ],
        "cta_strategies": ["consultation_booking", "service_inquiry"],
    },
    {
        "service_id": "solidity-masterclass",
        "content_types": ["tutorial", "blog", "case-study"],
        "keywords": [
            "solidity",
            "smart contracts",
            "ethereum development",
            "defi protocols",
            "contract security",
            "gas optimization",
            "openzeppelin",
            "ethereum virtual machine",
        ],
        "cta_strategies": ["consultation_booking", "service_inquiry"],
    },
    {
        "service_id": "custom-blockchain-dev",
        "content_types": ["case-study", "blog", "opinion"],
        "keywords": [
            "custom blockchain",
            "consensus mechanisms",
            "blockchain architecture",
            "enterprise blockchain",
            "private blockchain",
            "tokenomics",
            "blockchain scalability",
            "distributed systems",
        ],
        "cta_strategies": ["project_inquiry", "consultation_booking"],
    },
    {
        "service_id": "defi-protocol-dev",
        "content_types": ["tutorial", "case-study", "blog"],
        "keywords": [
            "defi development",
            "automated market makers",
            "yield farming",
            "liquidity mining",
            "governance tokens",
            "flash loans",
            "composability",
            "protocol security",
        ],
        "cta_strategies": ["project_inquiry", "consultation_booking"],
    },
    {
        "service_id": "smart-contract-audit",
        "content_types": ["blog", "tutorial", "case-study"],
        "keywords": [
            "smart contract security",
            "security audit",
            "vulnerability assessment",
            "code review",
            "reentrancy attacks",
            "integer overflow",
            "access control",
            "formal verification",
        ],
        "cta_strategies": ["service_inquiry", "consultation_booking"],
    },
    {
        "service_id": "basic-consultation",
        "content_types": ["blog", "opinion", "news"],
        "keywords": [
            "blockchain consulting",
            "technology selection",
            "architecture design",
            "blockchain strategy",
            "web3 adoption",
            "technical roadmap",
            "blockchain integration",
            "feasibility analysis",
        ],
        "cta_strategies": ["consultation_booking"],
    },
    {
        "service_id": "technical-blog-writing",
        "content_types": ["blog", "tutorial"],
        "keywords": [
            "technical writing",
            "developer documentation",
            "api documentation",
            "technical content",
            "blockchain education",
            "content strategy",
            "technical marketing",
            "developer relations",
        ],
        "cta_strategies": ["service_inquiry", "consultation_booking"],
    },
]
