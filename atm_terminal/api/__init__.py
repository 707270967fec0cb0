"""HTTP terminal routers."""
