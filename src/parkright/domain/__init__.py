"""🏛️ Доменний шар parkright: сутності та контракти без мережі."""
