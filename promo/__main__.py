from promo.cli import main

raise SystemExit(main())
