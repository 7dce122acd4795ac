from .wxcipher import main

raise SystemExit(main())
